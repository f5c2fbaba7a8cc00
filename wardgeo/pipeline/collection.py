"""FeatureCollection assembly."""

from __future__ import annotations

from typing import Iterable

from wardgeo.common.models import Collection, CollectionMetadata, Feature


def assemble_collection(features: Iterable[Feature], metadata: CollectionMetadata) -> Collection:
    return Collection(metadata=metadata, features=tuple(features))


def wrap_each(features: Iterable[Feature], metadata: CollectionMetadata) -> list[Collection]:
    """Wrap every feature in its own single-feature collection."""
    return [assemble_collection((feature,), metadata) for feature in features]
