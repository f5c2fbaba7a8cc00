"""Merge consecutive same-district features into MultiPolygons.

Grouping only looks at neighbours: two features of the same district that are
separated by another district stay apart. Callers that want one feature per
district must order the input first, e.g. with ``sort_by_district``.
"""

from __future__ import annotations

from dataclasses import replace
from functools import reduce
from typing import Any, Iterable, Sequence

from wardgeo.common.models import MULTI_POLYGON, POLYGON, Collection, Feature, Geometry

# (owner, merged feature) pairs; the owner is whatever wrapped the first member.
_Group = tuple[Any, Feature]


def district_key(name: str) -> str:
    return name.split("-", 1)[0].strip()


def _merge(group: Feature, member: Feature) -> Feature:
    polygons = group.geometry.polygons + member.geometry.polygons[:1]
    kind = MULTI_POLYGON if len(polygons) > 1 else POLYGON
    return replace(group, geometry=Geometry(kind=kind, polygons=polygons))


def _fold(groups: tuple[_Group, ...], item: _Group) -> tuple[_Group, ...]:
    owner, feature = item
    if groups:
        head_owner, head = groups[-1]
        if district_key(head.name) == district_key(feature.name):
            return groups[:-1] + ((head_owner, _merge(head, feature)),)
    return groups + ((owner, feature),)


def group_features(features: Iterable[Feature]) -> list[Feature]:
    """Fold ``features`` into one feature per run of equal district keys.

    Each group keeps the first member's name; later members contribute their
    first polygon.
    """
    groups = reduce(_fold, ((None, feature) for feature in features), ())
    return [feature for _owner, feature in groups]


def group_districts(collections: Sequence[Collection]) -> list[Collection]:
    """Group single-feature collections by the district of their feature name.

    Each resulting collection reuses the metadata of its group's first member.
    """
    items = ((collection, collection.features[0]) for collection in collections if collection.features)
    groups = reduce(_fold, items, ())
    return [replace(owner, features=(feature,)) for owner, feature in groups]


def sort_by_district(features: Iterable[Feature]) -> list[Feature]:
    return sorted(features, key=lambda feature: district_key(feature.name))
