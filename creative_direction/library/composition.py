"""Composition blocks: framing, focal distance, camera height, body positioning."""

from __future__ import annotations

from creative_direction.framework.types import CompositionBlock
from creative_direction.library._catalog import Catalog

COMPOSITION_BLOCKS: dict[str, CompositionBlock] = {
    "rule-of-thirds": CompositionBlock(
        name="Rule of Thirds",
        description="Classic composition with subject on intersection points",
        framing="Subject positioned on left or right third line",
        focal_distance="Medium shot, waist to head or full upper body",
        camera_height="Eye level to slightly below for flattering angle",
        body_positioning="Slight angle to camera, natural pose, relaxed shoulders",
        keywords=("rule of thirds", "balanced composition", "off-center framing", "professional standard"),
        tags=frozenset({"balanced", "classic", "professional", "versatile"}),
    ),
    "center-power-pose": CompositionBlock(
        name="Center-Framed Power Pose",
        description="Bold centered composition for maximum impact",
        framing="Subject centered and commanding the frame",
        focal_distance="Medium to tight shot emphasizing presence",
        camera_height="Slightly below eye level for empowering angle",
        body_positioning="Strong confident pose, direct eye line, commanding stance",
        keywords=("centered composition", "power pose", "direct framing", "confident stance"),
        tags=frozenset({"centered", "power", "direct", "confident"}),
    ),
    "cinematic-wide": CompositionBlock(
        name="Cinematic Wide",
        description="Wide environmental shot showing context and atmosphere",
        framing="Subject within environment, significant negative space",
        focal_distance="Wide shot showing full body and surroundings",
        camera_height="Eye level or slightly elevated for scene overview",
        body_positioning="Natural in environment, interacting with space",
        keywords=("wide shot", "environmental context", "cinematic scope", "storytelling frame"),
        tags=frozenset({"wide", "environmental", "cinematic", "storytelling"}),
    ),
    "close-up-beauty": CompositionBlock(
        name="Close-Up Beauty Crop",
        description="Tight beauty shot focusing on face and expression",
        framing="Tight crop from shoulders up or head and shoulders only",
        focal_distance="Close-up emphasizing facial features and expression",
        camera_height="Slightly below eye level for flattering angle",
        body_positioning="Shoulders angled, face to camera, expressive gaze",
        keywords=("beauty close-up", "facial focus", "tight crop", "expressive portrait"),
        tags=frozenset({"beauty", "facial", "tight", "expressive"}),
    ),
    "three-quarter-body": CompositionBlock(
        name="3/4 Body Shot",
        description="Versatile composition showing personality and style",
        framing="From mid-thigh or knee to head, showing outfit and pose",
        focal_distance="Three-quarter length capturing style and presence",
        camera_height="Chest to eye level for balanced proportion",
        body_positioning="Angled pose showing body line, weight on back leg",
        keywords=("three-quarter length", "fashion shot", "outfit showcase", "balanced frame"),
        tags=frozenset({"three-quarter", "fashion", "outfit", "balanced"}),
    ),
    "over-shoulder": CompositionBlock(
        name="Over-Shoulder Shot",
        description="Dynamic angle showing interaction or environment",
        framing="Camera behind shoulder looking at subject or scene",
        focal_distance="Medium shot with foreground element (shoulder)",
        camera_height="Subject eye level creating intimate viewpoint",
        body_positioning="Turned away slightly, natural candid positioning",
        keywords=("over shoulder", "dynamic angle", "foreground element", "candid perspective"),
        tags=frozenset({"over", "shoulder", "dynamic", "foreground", "candid"}),
    ),
    "lifestyle-candid": CompositionBlock(
        name="Lifestyle Candid Movement",
        description="Natural movement captured in authentic moment",
        framing="Loose framing allowing for movement and spontaneity",
        focal_distance="Medium to wide capturing action and context",
        camera_height="Varied for natural perspective of scene",
        body_positioning="Natural movement, candid action, authentic gesture",
        keywords=("candid moment", "natural movement", "lifestyle shot", "spontaneous framing"),
        tags=frozenset({"candid", "natural", "lifestyle", "spontaneous"}),
    ),
    "symmetrical": CompositionBlock(
        name="Symmetrical Framing",
        description="Balanced composition with centered symmetry",
        framing="Perfect symmetry with subject as central axis",
        focal_distance="Medium shot with balanced left-right composition",
        camera_height="Eye level for true symmetrical perspective",
        body_positioning="Centered pose, symmetrical stance or environment",
        keywords=("symmetrical composition", "centered balance", "architectural framing", "formal structure"),
        tags=frozenset({"symmetrical", "centered", "architectural", "formal"}),
    ),
    "micro-detail": CompositionBlock(
        name="Micro-Detail Crop",
        description="Extreme close-up emphasizing texture and detail",
        framing="Tight crop on specific feature or detail element",
        focal_distance="Macro to extreme close-up",
        camera_height="Direct angle to detail being featured",
        body_positioning="Isolated detail - hand, jewelry, fabric texture, eye, etc.",
        keywords=("macro detail", "extreme close-up", "texture focus", "intimate detail"),
        tags=frozenset({"macro", "extreme", "texture", "intimate"}),
    ),
    "elevator-symmetry": CompositionBlock(
        name="Elevator Symmetry",
        description="Centered symmetrical composition for confined elevator space",
        framing="Perfectly centered with symmetrical elevator elements on sides",
        focal_distance="Medium to tight shot emphasizing vertical space",
        camera_height="Eye level for true symmetrical perspective",
        body_positioning="Centered stance, using mirror and metal elements for symmetry",
        keywords=("symmetrical framing", "elevator composition", "centered balance", "confined space"),
        tags=frozenset({"symmetrical", "elevator", "centered", "confined", "mirror"}),
    ),
    "mirror-split-composition": CompositionBlock(
        name="Mirror Split Composition",
        description="Composition utilizing mirror reflection to create dual perspective",
        framing="Split frame showing direct view and mirror reflection",
        focal_distance="Medium shot capturing both subject and reflection",
        camera_height="Aligned with mirror for optimal reflection capture",
        body_positioning="Angled to show both direct and reflected view",
        keywords=("mirror composition", "reflection framing", "dual perspective", "split view"),
        tags=frozenset({"mirror", "reflection", "split", "dual", "creative"}),
    ),
    "tight-vertical-frame": CompositionBlock(
        name="Tight Vertical Frame",
        description="Vertical crop emphasizing height and vertical elements",
        framing="Tight vertical format, emphasizing full body or elongated space",
        focal_distance="Full body or three-quarter in vertical format",
        camera_height="Varied to emphasize vertical perspective",
        body_positioning="Elongated pose emphasizing vertical lines",
        keywords=("vertical composition", "tight crop", "elongated frame", "vertical emphasis"),
        tags=frozenset({"vertical", "tight", "elongated", "full-body"}),
    ),
    "fashion-crop": CompositionBlock(
        name="Fashion Crop",
        description="Editorial fashion crop showing outfit and presence",
        framing="Strategic crop from knees or thighs up, fashion-forward",
        focal_distance="Three-quarter to full body showing outfit details",
        camera_height="Chest level for editorial proportion",
        body_positioning="Fashion pose with weight shift, editorial stance",
        keywords=("fashion framing", "editorial crop", "outfit showcase", "fashion proportion"),
        tags=frozenset({"fashion", "editorial", "outfit", "stylish", "crop"}),
    ),
    "shoulder-up-cinematic": CompositionBlock(
        name="Shoulder-Up Cinematic",
        description="Cinematic tight crop from shoulders emphasizing face and expression",
        framing="Shoulders to top of head, cinematic intimacy",
        focal_distance="Close-up with cinematic quality and emotional depth",
        camera_height="Slightly below eye level for cinematic angle",
        body_positioning="Shoulders angled, expressive face, emotional presence",
        keywords=("cinematic close-up", "shoulder crop", "intimate framing", "emotional depth"),
        tags=frozenset({"cinematic", "close-up", "intimate", "emotional", "dramatic"}),
    ),
    "wide-room-editorial": CompositionBlock(
        name="Wide-Room Editorial",
        description="Environmental editorial showing subject within luxury space",
        framing="Wide composition with significant environment context",
        focal_distance="Wide shot showing full body and luxury interior",
        camera_height="Eye level or slightly elevated for scene overview",
        body_positioning="Subject positioned within environment, showing spatial relationship",
        keywords=("environmental composition", "wide editorial", "contextual framing", "luxury space"),
        tags=frozenset({"wide", "editorial", "environmental", "luxury", "contextual"}),
    ),
    "golden-hour-backlit": CompositionBlock(
        name="Golden Hour Backlit Framing",
        description="Silhouette or glow composition with golden hour backlight",
        framing="Subject framed against golden light source, dramatic rim",
        focal_distance="Medium to wide showing light quality and atmosphere",
        camera_height="Low to eye level maximizing golden hour effect",
        body_positioning="Positioned to catch rim light, silhouette or glowing edge",
        keywords=("backlit composition", "golden hour framing", "rim light focus", "atmospheric"),
        tags=frozenset({"golden-hour", "backlit", "atmospheric", "dramatic", "glow"}),
    ),
    "street-diagonal-motion": CompositionBlock(
        name="Street Diagonal Motion Frame",
        description="Dynamic diagonal composition suggesting movement and energy",
        framing="Diagonal lines leading to subject, dynamic perspective",
        focal_distance="Medium shot with environmental diagonal elements",
        camera_height="Varied angle to emphasize diagonal composition",
        body_positioning="Dynamic pose aligned with diagonal energy",
        keywords=("diagonal composition", "dynamic framing", "motion energy", "street photography"),
        tags=frozenset({"street", "diagonal", "dynamic", "motion", "energetic"}),
    ),
    "vanity-mirror-centered": CompositionBlock(
        name="Vanity Mirror Centered",
        description="Centered vanity mirror composition with perfect symmetry",
        framing="Centered in mirror frame with balanced elements",
        focal_distance="Medium shot capturing mirror frame and subject",
        camera_height="Eye level for direct mirror engagement",
        body_positioning="Centered facing mirror, symmetrical balanced pose",
        keywords=("vanity composition", "mirror centered", "symmetrical frame", "beauty shot"),
        tags=frozenset({"vanity", "mirror", "centered", "symmetrical", "beauty"}),
    ),
}

COMPOSITION_CATALOG: Catalog[CompositionBlock] = Catalog(
    "composition", COMPOSITION_BLOCKS, default_key="rule-of-thirds"
)
