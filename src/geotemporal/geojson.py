"""GeoJSON helpers."""

from __future__ import annotations

from typing import Any, Optional

__all__ = ["build_feature_collection"]


def build_feature_collection(geometry: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    """Wrap a single geometry in a FeatureCollection.

    Args:
        geometry: GeoJSON geometry object (e.g. ``{"type": "Point", ...}``)

    Returns:
        FeatureCollection with one property-less Feature, or None when no
        geometry is given
    """
    if not geometry:
        return None

    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {},
                "geometry": geometry,
            },
        ],
    }
