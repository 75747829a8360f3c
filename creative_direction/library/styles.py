"""Personal style profiles and the trending looks blended into every style suggestion."""

from __future__ import annotations

from creative_direction.framework.types import PersonalStyle
from creative_direction.library._catalog import Catalog

DEFAULT_STYLE_KEY = "minimalist"

PERSONAL_STYLES: dict[str, PersonalStyle] = {
    "minimalist": PersonalStyle(
        name="Minimalist",
        keywords=("clean lines", "neutral tones", "effortless"),
        color_palette=("white", "beige", "soft gray"),
        wardrobe_keywords=("tailored trousers", "crisp white shirt", "minimal jewelry"),
    ),
    "quiet-luxury": PersonalStyle(
        name="Quiet Luxury",
        keywords=("understated elegance", "expensive fabrics", "old money style"),
        color_palette=("cream", "camel", "navy"),
        wardrobe_keywords=("cashmere knit", "silk blouse", "tailored coat"),
    ),
    "clean-girl": PersonalStyle(
        name="Clean Girl",
        keywords=("dewy skin", "fresh face", "effortless beauty"),
        color_palette=("nude", "white", "gold"),
        wardrobe_keywords=("ribbed tank", "gold hoops", "slicked back bun"),
    ),
    "scandi": PersonalStyle(
        name="Scandi",
        keywords=("hygge vibes", "natural fabrics", "soft lighting"),
        color_palette=("beige", "oatmeal", "white"),
        wardrobe_keywords=("chunky knits", "linen", "wool"),
    ),
    "streetwear": PersonalStyle(
        name="Streetwear",
        keywords=("urban edge", "oversized silhouettes", "bold presence"),
        color_palette=("black", "olive", "gray"),
        wardrobe_keywords=("oversized hoodie", "cargo pants", "chunky sneakers"),
    ),
    "glam": PersonalStyle(
        name="Glam",
        keywords=("maximalist glamour", "dramatic", "bold presence"),
        color_palette=("black", "red", "gold"),
        wardrobe_keywords=("fur coat", "red lips", "gold jewelry"),
    ),
    "bohemian": PersonalStyle(
        name="Bohemian",
        keywords=("free spirited", "earthy", "layered textures"),
        color_palette=("terracotta", "rust", "cream"),
        wardrobe_keywords=("flowing maxi dress", "woven bag", "layered necklaces"),
    ),
    "classic": PersonalStyle(
        name="Classic",
        keywords=("timeless", "polished", "refined"),
        color_palette=("navy", "white", "camel"),
        wardrobe_keywords=("trench coat", "ballet flats", "pearl earrings"),
    ),
    "sporty": PersonalStyle(
        name="Sporty",
        keywords=("active lifestyle", "fresh energy", "athleisure"),
        color_palette=("white", "black", "sage"),
        wardrobe_keywords=("matching set", "clean trainers", "baseball cap"),
    ),
}

# Only the head of this list is blended; order is editorial priority.
TRENDING_LOOKS: tuple[str, ...] = (
    "oversized blazers",
    "quiet luxury knits",
    "wide leg trousers",
    "ballet flats",
    "cashmere layers",
    "slicked back hair",
)

TRENDING_LOOKS_COUNT = 3

STYLE_CATALOG: Catalog[PersonalStyle] = Catalog(
    "style", PERSONAL_STYLES, default_key=DEFAULT_STYLE_KEY
)
