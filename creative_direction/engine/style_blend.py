from __future__ import annotations

from collections.abc import Iterable, Sequence

from creative_direction.framework.types import StyleBlendBlock
from creative_direction.library._catalog import normalize_key
from creative_direction.library.styles import (
    STYLE_CATALOG,
    TRENDING_LOOKS,
    TRENDING_LOOKS_COUNT,
)


def _dedup(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


def recognized_styles(styles: Sequence[str]) -> tuple[str, ...]:
    """Catalog keys for the recognised names, in catalog order; unknown names are dropped."""

    wanted = {normalize_key(style) for style in styles if style}
    return tuple(key for key in STYLE_CATALOG.keys() if key in wanted)


def blend(styles: Sequence[str]) -> StyleBlendBlock:
    """
    Union the keyword, colour and wardrobe lists of every recognised style.

    Styles are visited in catalog order, so the result does not depend on the
    order (or repetition) of `styles`. The head of TRENDING_LOOKS is always
    appended.
    """

    keys = recognized_styles(styles)
    profiles = [STYLE_CATALOG[key] for key in keys]
    return StyleBlendBlock(
        styles=keys,
        keywords=_dedup(kw for profile in profiles for kw in profile.keywords),
        color_palette=_dedup(color for profile in profiles for color in profile.color_palette),
        wardrobe_keywords=_dedup(item for profile in profiles for item in profile.wardrobe_keywords),
        trending_looks=TRENDING_LOOKS[:TRENDING_LOOKS_COUNT],
    )
