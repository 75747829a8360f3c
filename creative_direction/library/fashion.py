"""Wardrobe categories keyed by category name."""

from __future__ import annotations

from creative_direction.framework.types import FashionBlock
from creative_direction.library._catalog import Catalog

DEFAULT_FASHION_CATEGORY = "elevated-basics"

FASHION_BLOCKS: dict[str, FashionBlock] = {
    "elevated-basics": FashionBlock(
        category="elevated-basics",
        wardrobe_keywords=("fitted white tee", "high-waisted straight jeans", "minimal gold jewelry"),
        materials=("soft cotton", "rigid denim"),
        palette="white, denim blue and warm gold",
        scenario_affinity=frozenset({"cafe", "apartment", "workspace", "home-office"}),
    ),
    "quiet-luxury": FashionBlock(
        category="quiet-luxury",
        wardrobe_keywords=("cream cashmere sweater", "tailored wide-leg trousers", "structured leather tote"),
        materials=("cashmere", "wool crepe", "smooth leather"),
        palette="cream, camel and soft ivory",
        scenario_affinity=frozenset({"hotel", "lobby", "luxury", "airport-lounge"}),
    ),
    "power-tailoring": FashionBlock(
        category="power-tailoring",
        wardrobe_keywords=("oversized black blazer", "silk camisole", "pointed-toe pumps"),
        materials=("wool suiting", "silk"),
        palette="black, crisp white and charcoal",
        scenario_affinity=frozenset({"office", "elevator", "lobby", "workspace"}),
    ),
    "street-edge": FashionBlock(
        category="street-edge",
        wardrobe_keywords=("leather moto jacket", "baggy cargo trousers", "chunky sneakers"),
        materials=("leather", "cotton twill"),
        palette="black, olive and stone gray",
        scenario_affinity=frozenset({"street", "metro", "parisian", "rooftop"}),
    ),
    "athleisure": FashionBlock(
        category="athleisure",
        wardrobe_keywords=("matching sports bra and leggings set", "cropped zip jacket", "clean trainers"),
        materials=("sculpting nylon", "ribbed knit"),
        palette="sage green, black and white",
        scenario_affinity=frozenset({"gym", "fitness"}),
    ),
    "evening-glam": FashionBlock(
        category="evening-glam",
        wardrobe_keywords=("black satin slip dress", "strappy heels", "statement earrings"),
        materials=("satin", "fine metal"),
        palette="black, champagne and deep burgundy",
        scenario_affinity=frozenset({"nightclub", "restaurant", "night", "rooftop-city-lights"}),
    ),
    "resort-ease": FashionBlock(
        category="resort-ease",
        wardrobe_keywords=("linen button-down shirt", "flowing midi skirt", "woven raffia bag"),
        materials=("linen", "raffia"),
        palette="sand, white and sun-washed terracotta",
        scenario_affinity=frozenset({"beach", "balcony", "outdoor"}),
    ),
    "travel-polish": FashionBlock(
        category="travel-polish",
        wardrobe_keywords=("long camel coat", "fine knit set", "oversized sunglasses"),
        materials=("double-faced wool", "merino knit"),
        palette="camel, oatmeal and soft black",
        scenario_affinity=frozenset({"airport", "car", "hallway"}),
    ),
    "cozy-lounge": FashionBlock(
        category="cozy-lounge",
        wardrobe_keywords=("oversized knit cardigan", "silk pajama set", "fuzzy slippers"),
        materials=("chunky knit", "washed silk"),
        palette="oatmeal, blush and cream",
        scenario_affinity=frozenset({"bedroom", "scandinavian", "apartment"}),
    ),
    "scandi-minimal": FashionBlock(
        category="scandi-minimal",
        wardrobe_keywords=("boxy poplin shirt", "relaxed wool trousers", "leather loafers"),
        materials=("poplin", "wool", "leather"),
        palette="white, gray and pale beige",
        scenario_affinity=frozenset({"scandinavian", "minimalist", "marble"}),
    ),
    "boutique-chic": FashionBlock(
        category="boutique-chic",
        wardrobe_keywords=("tweed jacket", "mini skirt", "quilted chain bag"),
        materials=("boucle tweed", "quilted leather"),
        palette="pink, ivory and gold",
        scenario_affinity=frozenset({"boutique", "closet", "shopping", "mall"}),
    ),
    "beauty-clean": FashionBlock(
        category="beauty-clean",
        wardrobe_keywords=("white ribbed tank", "satin robe", "hair clip"),
        materials=("ribbed cotton", "satin"),
        palette="white, nude and soft pink",
        scenario_affinity=frozenset({"vanity", "beauty", "bathroom"}),
    ),
}

FASHION_CATALOG: Catalog[FashionBlock] = Catalog(
    "fashion", FASHION_BLOCKS, default_key=DEFAULT_FASHION_CATEGORY
)
