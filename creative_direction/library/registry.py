from __future__ import annotations

from typing import Any

from creative_direction.library._catalog import Catalog
from creative_direction.library.composition import COMPOSITION_CATALOG
from creative_direction.library.fashion import FASHION_CATALOG
from creative_direction.library.lighting import LIGHTING_CATALOG
from creative_direction.library.mood import MOOD_CATALOG
from creative_direction.library.pose import POSE_CATALOG
from creative_direction.library.scenario import SCENARIO_CATALOG
from creative_direction.library.styles import STYLE_CATALOG

CATALOGS: dict[str, Catalog[Any]] = {
    catalog.dimension: catalog
    for catalog in (
        MOOD_CATALOG,
        SCENARIO_CATALOG,
        COMPOSITION_CATALOG,
        LIGHTING_CATALOG,
        POSE_CATALOG,
        FASHION_CATALOG,
        STYLE_CATALOG,
    )
}


def get_catalog(dimension: str) -> Catalog[Any]:
    key = (dimension or "").strip().lower()
    if key not in CATALOGS:
        raise ValueError(
            f"Unknown dimension: {dimension!r} (expected one of: {', '.join(CATALOGS)})"
        )
    return CATALOGS[key]


def get_block(dimension: str, name: str | None) -> Any:
    """Look up a block by key or display name; unknown names give the dimension default."""
    return get_catalog(dimension).get(name)
