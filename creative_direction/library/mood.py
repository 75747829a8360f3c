"""Mood blocks: emotional tone, colour palette and atmosphere."""

from __future__ import annotations

from creative_direction.framework.types import MoodBlock
from creative_direction.library._catalog import Catalog

MOOD_BLOCKS: dict[str, MoodBlock] = {
    "cinematic-luxury": MoodBlock(
        name="Cinematic Luxury",
        description="High-end editorial with dramatic lighting and sophisticated atmosphere",
        lighting="Dramatic directional light with controlled shadows, cinematic contrast",
        color_palette=("deep blacks", "warm highlights", "muted golds", "rich browns"),
        atmosphere="Sophisticated, timeless, aspirational",
        energy="Confident, powerful, composed",
        texture="Rich fabrics, smooth surfaces, refined details",
        keywords=("cinematic lighting", "luxury aesthetic", "dramatic shadows", "editorial composition"),
        tags=frozenset({"luxury", "editorial", "dramatic", "cinematic"}),
    ),
    "nordic-clean": MoodBlock(
        name="Nordic Clean",
        description="Minimalist Scandinavian aesthetic with soft natural light",
        lighting="Soft diffused natural light, even illumination, minimal shadows",
        color_palette=("clean whites", "soft grays", "warm beige", "pale wood tones"),
        atmosphere="Calm, serene, effortlessly elegant",
        energy="Peaceful, centered, natural",
        texture="Natural materials, smooth surfaces, organic textures",
        keywords=("scandinavian aesthetic", "soft natural light", "minimalist", "clean composition"),
        tags=frozenset({"nordic", "clean", "minimalist", "natural", "serene"}),
    ),
    "soft-morning-light": MoodBlock(
        name="Soft Morning Light",
        description="Gentle golden hour glow with fresh, optimistic energy",
        lighting="Warm soft sunlight, gentle shadows, glowing skin tones",
        color_palette=("warm golds", "soft peach", "cream", "light caramel"),
        atmosphere="Fresh, optimistic, inviting",
        energy="Gentle, warm, approachable",
        texture="Soft fabrics, natural skin glow, warm materials",
        keywords=("golden hour glow", "soft sunlight", "warm atmosphere", "fresh energy"),
        tags=frozenset({"morning", "soft", "warm", "optimistic", "inviting"}),
    ),
    "moody-night-energy": MoodBlock(
        name="Moody Night Energy",
        description="Urban evening vibe with neon accents and cinematic darkness",
        lighting="Low-key lighting with dramatic highlights, urban glow",
        color_palette=("deep blues", "neon accents", "warm streetlight", "rich blacks"),
        atmosphere="Urban, edgy, cinematic",
        energy="Bold, confident, mysterious",
        texture="Sleek surfaces, city textures, reflective materials",
        keywords=("moody lighting", "urban night", "cinematic darkness", "neon accents"),
        tags=frozenset({"night", "urban", "moody", "cinematic", "edgy"}),
    ),
    "instagram-glossy": MoodBlock(
        name="Instagram Glossy",
        description="High-gloss influencer aesthetic with perfect lighting",
        lighting="Ring light glow, even beauty lighting, minimal shadows",
        color_palette=("bright whites", "pops of color", "clean tones", "glossy finish"),
        atmosphere="Polished, vibrant, social-media ready",
        energy="Energetic, confident, engaging",
        texture="Glossy surfaces, smooth skin, crisp details",
        keywords=("ring light beauty", "instagram aesthetic", "glossy finish", "vibrant energy"),
        tags=frozenset({"instagram", "glossy", "vibrant", "polished", "social-media"}),
    ),
    "candid-lifestyle": MoodBlock(
        name="Candid Lifestyle",
        description="Natural authentic moments with relatable energy",
        lighting="Natural available light, soft shadows, realistic illumination",
        color_palette=("natural tones", "warm neutrals", "authentic colors", "real-world palette"),
        atmosphere="Authentic, relatable, genuine",
        energy="Natural, spontaneous, real",
        texture="Lived-in spaces, natural materials, everyday textures",
        keywords=("natural lighting", "candid moment", "authentic lifestyle", "relatable energy"),
        tags=frozenset({"candid", "lifestyle", "natural", "authentic", "relatable"}),
    ),
    "power-woman-energy": MoodBlock(
        name="Power Woman Energy",
        description="Confident professional with strong presence",
        lighting="Directional dramatic lighting, defined shadows, powerful contrast",
        color_palette=("bold blacks", "crisp whites", "strong accents", "confident tones"),
        atmosphere="Powerful, commanding, professional",
        energy="Confident, strong, purposeful",
        texture="Tailored fabrics, structured materials, sharp details",
        keywords=("dramatic lighting", "power pose", "confident presence", "professional aesthetic"),
        tags=frozenset({"power", "woman", "professional", "dramatic", "strong"}),
    ),
    "editorial-high-fashion": MoodBlock(
        name="Editorial High Fashion",
        description="Magazine-quality fashion photography with artistic composition",
        lighting="Controlled studio lighting, artistic shadows, fashion-forward",
        color_palette=("editorial black", "statement colors", "high contrast", "artistic palette"),
        atmosphere="Artistic, avant-garde, fashion-forward",
        energy="Bold, expressive, striking",
        texture="Designer fabrics, architectural elements, editorial quality",
        keywords=("editorial lighting", "high fashion", "artistic composition", "magazine quality"),
        tags=frozenset({"editorial", "fashion", "high", "artistic", "striking"}),
    ),
    "romantic-warm": MoodBlock(
        name="Romantic Warm",
        description="Soft romantic atmosphere with warm inviting tones",
        lighting="Soft diffused light, warm glow, gentle illumination",
        color_palette=("warm rose", "soft gold", "cream", "gentle peach"),
        atmosphere="Romantic, intimate, dreamy",
        energy="Soft, gentle, feminine",
        texture="Soft fabrics, flowing materials, delicate details",
        keywords=("soft romantic lighting", "warm glow", "dreamy atmosphere", "gentle energy"),
        tags=frozenset({"romantic", "warm", "soft", "dreamy", "intimate"}),
    ),
    "commercial-beauty-light": MoodBlock(
        name="Commercial Beauty Light",
        description="Professional beauty lighting for skin and product photography",
        lighting="Beauty dish setup, even skin illumination, commercial quality",
        color_palette=("neutral skin tones", "clean whites", "soft accents", "professional grade"),
        atmosphere="Polished, professional, commercial",
        energy="Confident, refined, commercial-ready",
        texture="Flawless skin, smooth surfaces, professional finish",
        keywords=("beauty dish lighting", "commercial quality", "flawless skin", "professional polish"),
        tags=frozenset({"commercial", "beauty", "lighting", "professional", "polished"}),
    ),
    "night-drama-luxury": MoodBlock(
        name="Night Drama Luxury",
        description="High-contrast nighttime editorial with deep shadows and dramatic highlights",
        lighting="Low-key dramatic lighting with strong highlights, deep blacks",
        color_palette=("midnight black", "golden highlights", "deep navy", "rich amber"),
        atmosphere="Mysterious, powerful, nocturnal luxury",
        energy="Bold, mysterious, confident",
        texture="Luxe fabrics catching light, dramatic shadows, refined details",
        keywords=("night photography", "dramatic contrast", "luxury evening", "nocturnal elegance"),
        tags=frozenset({"night", "luxury", "dramatic", "editorial", "mystery"}),
    ),
    "paris-midnight-editorial": MoodBlock(
        name="Paris Midnight Editorial",
        description="Parisian night aesthetic with romantic street lighting and urban sophistication",
        lighting="Warm street lamps, soft city glow, romantic ambient light",
        color_palette=("warm amber", "soft golds", "deep charcoal", "romantic rose"),
        atmosphere="Romantic, sophisticated, Parisian nights",
        energy="Elegant, mysterious, cosmopolitan",
        texture="Soft fabrics, urban textures, elegant details",
        keywords=("parisian nights", "street lighting", "romantic city", "urban elegance"),
        tags=frozenset({"paris", "night", "street", "romantic", "luxury", "editorial"}),
    ),
    "urban-noir-energy": MoodBlock(
        name="Urban Noir Energy",
        description="Dark moody urban aesthetic with cinematic film noir vibes",
        lighting="High-contrast noir lighting, dramatic shadows, selective highlights",
        color_palette=("deep blacks", "cool grays", "neon accents", "stark whites"),
        atmosphere="Edgy, cinematic, urban mystery",
        energy="Bold, mysterious, powerful",
        texture="Urban materials, sleek surfaces, cinematic grain",
        keywords=("noir aesthetic", "urban drama", "cinematic night", "mysterious energy"),
        tags=frozenset({"night", "urban", "noir", "dramatic", "edgy", "cinematic"}),
    ),
    "luxury-hotel-elegance": MoodBlock(
        name="Luxury Hotel Elegance",
        description="Five-star hotel aesthetic with sophisticated ambient lighting",
        lighting="Warm ambient hotel lighting, soft layered illumination",
        color_palette=("champagne gold", "warm cream", "rich mahogany", "soft ivory"),
        atmosphere="Refined, luxurious, sophisticated hospitality",
        energy="Elegant, composed, affluent",
        texture="Marble, soft linens, polished surfaces, luxury materials",
        keywords=("hotel luxury", "refined elegance", "sophisticated lighting", "upscale ambiance"),
        tags=frozenset({"hotel", "luxury", "elegant", "sophisticated", "refined"}),
    ),
    "airport-lounge-wealthy": MoodBlock(
        name="Airport Lounge Wealthy",
        description="Jet-setter lifestyle with clean modern airport lounge aesthetics",
        lighting="Clean even lighting with soft ambient glow, modern illumination",
        color_palette=("clean whites", "soft grays", "metallic accents", "warm neutrals"),
        atmosphere="Cosmopolitan, travel luxury, modern sophistication",
        energy="Confident, worldly, polished",
        texture="Modern materials, sleek surfaces, minimalist luxury",
        keywords=("airport lounge", "travel luxury", "jet setter", "modern elegance"),
        tags=frozenset({"airport", "travel", "luxury", "modern", "professional"}),
    ),
    "street-fashion-power": MoodBlock(
        name="Street Fashion Power",
        description="Bold street fashion editorial with confident urban energy",
        lighting="Natural urban daylight with architectural shadows",
        color_palette=("bold blacks", "crisp whites", "statement colors", "urban grays"),
        atmosphere="Bold, fashion-forward, street culture",
        energy="Confident, edgy, powerful",
        texture="Designer streetwear, urban textures, bold fabrics",
        keywords=("street fashion", "urban editorial", "bold style", "fashion power"),
        tags=frozenset({"street", "fashion", "editorial", "urban", "bold", "confident"}),
    ),
    "mirror-selfie-cinematic": MoodBlock(
        name="Mirror Selfie Cinematic",
        description="Elevated mirror selfie with editorial cinematic quality",
        lighting="Even reflection lighting with subtle dramatic shadows",
        color_palette=("clean neutrals", "warm metallics", "soft shadows", "crisp highlights"),
        atmosphere="Self-assured, editorial quality, modern confidence",
        energy="Confident, modern, self-possessed",
        texture="Reflective surfaces, sharp details, polished aesthetic",
        keywords=("mirror selfie", "editorial quality", "reflection lighting", "modern portrait"),
        tags=frozenset({"mirror", "selfie", "editorial", "modern", "confident"}),
    ),
    "high-rise-rooftop-glow": MoodBlock(
        name="High-Rise Rooftop Glow",
        description="Urban rooftop with golden hour or city lights ambiance",
        lighting="Golden hour glow or soft city lights creating atmospheric illumination",
        color_palette=("golden warmth", "urban blues", "soft ambers", "twilight tones"),
        atmosphere="Aspirational, elevated, urban luxury",
        energy="Confident, ambitious, cosmopolitan",
        texture="City textures, architectural details, elevated perspective",
        keywords=("rooftop photography", "city glow", "urban elevation", "golden hour rooftop"),
        tags=frozenset({"rooftop", "urban", "luxury", "golden-hour", "cityscape"}),
    ),
    "clean-luxury-morning-light": MoodBlock(
        name="Clean Luxury Morning Light",
        description="Fresh morning aesthetic with clean luxury and soft natural light",
        lighting="Soft morning sunlight, clean even illumination, fresh atmosphere",
        color_palette=("fresh whites", "warm creams", "soft golds", "clean neutrals"),
        atmosphere="Fresh, optimistic, refined simplicity",
        energy="Calm, confident, composed",
        texture="Clean surfaces, natural materials, refined simplicity",
        keywords=("morning light", "clean aesthetic", "fresh luxury", "natural illumination"),
        tags=frozenset({"morning", "clean", "luxury", "fresh", "natural"}),
    ),
    "high-fashion-cold-lighting": MoodBlock(
        name="High Fashion Cold Lighting",
        description="Editorial fashion with cool-toned professional lighting",
        lighting="Cool fashion lighting, crisp highlights, professional studio quality",
        color_palette=("cool whites", "icy blues", "steel grays", "pure blacks"),
        atmosphere="High-fashion, avant-garde, editorial excellence",
        energy="Bold, striking, fashion-forward",
        texture="Designer fabrics, architectural lines, sharp details",
        keywords=("high fashion", "cool lighting", "editorial photography", "fashion excellence"),
        tags=frozenset({"fashion", "editorial", "cool-tones", "professional", "avant-garde"}),
    ),
    "warm-cozy-opulence": MoodBlock(
        name="Warm Cozy Opulence",
        description="Luxurious comfort with warm inviting atmosphere and rich textures",
        lighting="Warm ambient glow, soft layered lighting, cozy illumination",
        color_palette=("rich caramels", "warm cognac", "soft golds", "cream"),
        atmosphere="Luxurious comfort, inviting warmth, opulent relaxation",
        energy="Relaxed, indulgent, warm",
        texture="Plush fabrics, rich materials, cozy luxury",
        keywords=("cozy luxury", "warm opulence", "comfortable elegance", "rich textures"),
        tags=frozenset({"cozy", "luxury", "warm", "comfortable", "opulent"}),
    ),
    "gym-editorial-aesthetic": MoodBlock(
        name="Gym Editorial Aesthetic",
        description="Fitness lifestyle editorial with clean modern gym lighting",
        lighting="Clean gym lighting with even illumination and mirror reflections",
        color_palette=("clean whites", "bold blacks", "metallic accents", "fresh neutrals"),
        atmosphere="Active, aspirational fitness, editorial quality",
        energy="Powerful, strong, determined",
        texture="Athletic materials, modern equipment, clean surfaces",
        keywords=("gym photography", "fitness editorial", "athletic aesthetic", "workout lifestyle"),
        tags=frozenset({"gym", "fitness", "editorial", "athletic", "modern"}),
    ),
}

MOOD_CATALOG: Catalog[MoodBlock] = Catalog("mood", MOOD_BLOCKS, default_key="cinematic-luxury")
