"""
Pose blocks.

Descriptions go straight into the prompt, so they only name positions where
both legs and hands stay readable; phrasing like "legs tucked under" makes the
image model duplicate limbs.
"""

from __future__ import annotations

from creative_direction.framework.types import PoseBlock
from creative_direction.library._catalog import Catalog

DEFAULT_POSE_KEY = "natural-relaxed"

POSE_BLOCKS: dict[str, PoseBlock] = {
    "the-sip": PoseBlock(
        name="The Sip",
        description="bringing cup to lips mid-sip, eyes looking down naturally, relaxed shoulders",
        keywords=("coffee", "latte", "cup", "sip", "drink"),
        scenario_affinity=frozenset({"cafe", "bedroom", "restaurant"}),
    ),
    "window-seat-gaze": PoseBlock(
        name="Window Seat Gaze",
        description="seated by the window holding a cup in both hands, gazing outside in profile",
        keywords=("window", "gaze", "seat", "rain", "thoughtful"),
        scenario_affinity=frozenset({"cafe", "airport", "apartment"}),
    ),
    "mid-stride": PoseBlock(
        name="Mid-Stride Walk",
        description="caught mid-walk with natural arm swing, hair in motion, glancing past camera",
        keywords=("walk", "walking", "stride", "street", "city", "sidewalk"),
        scenario_affinity=frozenset({"street", "metro", "lobby", "hallway"}),
    ),
    "over-shoulder-look": PoseBlock(
        name="Over-Shoulder Look",
        description="body turned away, head turned back over the shoulder with a soft expression",
        keywords=("shoulder", "glance", "back", "look", "turn"),
        scenario_affinity=frozenset({"street", "rooftop", "hallway", "balcony"}),
    ),
    "building-lean": PoseBlock(
        name="Building Lean",
        description="leaning sideways against the wall, one leg bent, hands relaxed at sides",
        keywords=("lean", "leaning", "wall", "urban", "casual"),
        scenario_affinity=frozenset({"street", "elevator", "metro", "hallway"}),
    ),
    "mirror-check": PoseBlock(
        name="Mirror Check",
        description="holding phone at chest height facing the mirror, weight on one hip, partial profile",
        keywords=("mirror", "selfie", "phone", "reflection", "outfit"),
        scenario_affinity=frozenset({"elevator", "gym", "vanity", "closet", "bathroom"}),
    ),
    "hair-touch": PoseBlock(
        name="Hair Touch",
        description="one hand gently running through hair, chin slightly lifted, soft gaze",
        keywords=("hair", "beauty", "soft", "glow", "close-up"),
        scenario_affinity=frozenset({"vanity", "beauty", "bedroom"}),
    ),
    "weight-shift": PoseBlock(
        name="Weight Shift",
        description="standing with weight on one leg, opposite hip popped slightly, hand in pocket",
        keywords=("standing", "stand", "confident", "power", "boss"),
        scenario_affinity=frozenset({"office", "lobby", "boutique", "rooftop"}),
    ),
    "railing-lean": PoseBlock(
        name="Railing Lean",
        description="leaning forearms on the railing, looking out over the view, wind in hair",
        keywords=("view", "skyline", "railing", "sunset", "golden"),
        scenario_affinity=frozenset({"rooftop", "balcony", "beach"}),
    ),
    "cross-leg-sit": PoseBlock(
        name="Cross-Leg Sit",
        description="sitting with legs crossed, leaning slightly forward, elbow resting on knee",
        keywords=("sitting", "sit", "seated", "lounge", "booth"),
        scenario_affinity=frozenset({"lounge", "restaurant", "interior", "office"}),
    ),
    "book-read": PoseBlock(
        name="Book Read",
        description="holding an open book, eyes on the page, relaxed seated position",
        keywords=("book", "reading", "read", "cozy", "morning"),
        scenario_affinity=frozenset({"bedroom", "cafe", "apartment", "scandinavian"}),
    ),
    "rack-browse": PoseBlock(
        name="Rack Browse",
        description="looking through the clothing rack holding a hanger, candid half smile",
        keywords=("shopping", "boutique", "store", "closet", "hanger"),
        scenario_affinity=frozenset({"boutique", "closet", "shopping", "mall"}),
    ),
    "gym-set-rest": PoseBlock(
        name="Between Sets",
        description="resting between sets with towel over shoulder, water bottle in hand, steady breath",
        keywords=("gym", "workout", "fitness", "training", "sweat"),
        scenario_affinity=frozenset({"gym"}),
    ),
    "driver-seat-glance": PoseBlock(
        name="Driver Seat Glance",
        description="seated behind the wheel, turned toward the camera with one hand on the steering wheel",
        keywords=("car", "drive", "driving", "seat", "road"),
        scenario_affinity=frozenset({"car"}),
    ),
    "sunglasses-push": PoseBlock(
        name="Sunglasses Push",
        description="pushing sunglasses up onto the head with one hand, chin up, composed expression",
        keywords=("sunglasses", "shades", "mysterious", "travel", "beach"),
        scenario_affinity=frozenset({"airport", "beach", "street", "car"}),
    ),
    "dance-floor-turn": PoseBlock(
        name="Dance Floor Turn",
        description="mid-turn with arms loose, hair swinging, lit by colored light",
        keywords=("party", "dance", "neon", "club", "night"),
        scenario_affinity=frozenset({"nightclub"}),
    ),
    "natural-relaxed": PoseBlock(
        name="Natural Relaxed Pose",
        description="natural relaxed pose, shoulders down, hands resting naturally, soft expression",
        keywords=("natural", "relaxed", "candid"),
        scenario_affinity=frozenset(),
    ),
}

POSE_CATALOG: Catalog[PoseBlock] = Catalog("pose", POSE_BLOCKS, default_key=DEFAULT_POSE_KEY)
