"""Data models used across the pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from wardgeo.common.constants import LANGUAGE_CODES

Point = tuple[float, float]
Ring = tuple[Point, ...]
RingSet = tuple[Ring, ...]

POLYGON = "Polygon"
MULTI_POLYGON = "MultiPolygon"


@dataclass(frozen=True)
class Record:
    district: str
    ward: str
    raw_geometry: str
    status_flag: str
    row_index: int | None = None


def _ring_to_list(ring: Ring) -> list[list[float]]:
    return [[lon, lat] for lon, lat in ring]


def _ring_set_to_list(ring_set: RingSet) -> list[list[list[float]]]:
    return [_ring_to_list(ring) for ring in ring_set]


@dataclass(frozen=True)
class Geometry:
    """Polygon or MultiPolygon geometry.

    ``polygons`` holds one ring-set per polygon. A Polygon carries exactly one
    ring-set; a MultiPolygon carries one per merged member.
    """

    kind: str
    polygons: tuple[RingSet, ...]

    @property
    def polygon_count(self) -> int:
        return len(self.polygons)

    def to_dict(self) -> dict[str, Any]:
        if self.kind == POLYGON:
            coordinates: list = _ring_set_to_list(self.polygons[0]) if self.polygons else []
        else:
            coordinates = [_ring_set_to_list(ring_set) for ring_set in self.polygons]
        return {"type": self.kind, "coordinates": coordinates}


@dataclass(frozen=True)
class Feature:
    geometry: Geometry
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "Feature",
            "geometry": self.geometry.to_dict(),
            "properties": {"name": self.name},
        }


@dataclass(frozen=True)
class CollectionMetadata:
    name: str
    localized_names: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Collection:
    metadata: CollectionMetadata
    features: tuple[Feature, ...]
    kind: str = "FeatureCollection"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.metadata.name}
        for code in LANGUAGE_CODES:
            payload[f"name_{code}"] = self.metadata.localized_names.get(code, "")
        payload["type"] = self.kind
        payload["features"] = [feature.to_dict() for feature in self.features]
        return payload
