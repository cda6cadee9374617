"""
Targeting utilities.

Pure functions over targeting records: which dimensions a record constrains,
merging records, deriving the closed set of variant targetings, and reading
SDK bounds.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..models.targeting import (
    DIMENSION_TYPES,
    Abi,
    DimensionTargeting,
    SdkVersionTargeting,
    Targeting,
    TargetingDimension,
)

DEFAULT_MIN_SDK = 1
MAX_SDK = 2**31 - 1


def get_targeting_dimensions(targeting: Targeting) -> frozenset[TargetingDimension]:
    """Return the dimensions that have values or alternatives set."""
    return frozenset(
        dimension
        for dimension in TargetingDimension
        if (dimension_targeting := targeting.get(dimension)) is not None
        and not dimension_targeting.is_default
    )


def merge_targeting(*targetings: Targeting) -> Targeting:
    """Merge records by dimension union.

    Values and alternatives are unioned per dimension. A value present in one
    record and listed as an alternative in another stays a value.
    """
    merged = Targeting()
    for dimension in TargetingDimension:
        parts = [t.get(dimension) for t in targetings]
        parts = [p for p in parts if p is not None]
        if not parts:
            continue
        values = frozenset().union(*(p.value for p in parts))  # type: ignore[attr-defined]
        alternatives = frozenset().union(*(p.alternatives for p in parts))  # type: ignore[attr-defined]
        merged = merged.with_dimension(
            DIMENSION_TYPES[dimension](value=values, alternatives=alternatives - values)
        )
    return merged


def generate_all_variant_targetings(
    targetings: Iterable[Targeting],
    dimension: TargetingDimension = TargetingDimension.SDK_VERSION,
) -> frozenset[Targeting]:
    """Close a set of per-value records over their sibling values.

    Alternatives on the inputs are ignored and recomputed: every distinct
    value of ``dimension`` found among the inputs yields exactly one record
    whose alternatives are all the other values. Inputs that do not set
    ``dimension`` contribute nothing.

    Args:
        targetings: Records carrying values along ``dimension``.
        dimension: The dimension to close over.

    Returns:
        One record per distinct value, each with only ``dimension`` set.
    """
    all_values: frozenset = frozenset()
    for targeting in targetings:
        all_values |= dimension_values(targeting.get(dimension))

    targeting_type = DIMENSION_TYPES[dimension]
    return frozenset(
        Targeting().with_dimension(
            targeting_type(value=frozenset({value}), alternatives=all_values - {value})
        )
        for value in all_values
    )


def get_min_sdk(sdk_version_targeting: SdkVersionTargeting | None) -> int:
    """Lowest API level the record applies to; DEFAULT_MIN_SDK when unset."""
    if sdk_version_targeting is None or not sdk_version_targeting.value:
        return DEFAULT_MIN_SDK
    return min(sdk.min for sdk in sdk_version_targeting.value)


def get_max_sdk(sdk_version_targeting: SdkVersionTargeting | None) -> int:
    """Exclusive upper API level bound of the record.

    The bound is the smallest alternative above the record's own minimum.
    When no alternative lies above it (or there are none, or the record is
    unset) the record is the topmost variant and MAX_SDK is returned.
    """
    if sdk_version_targeting is None or sdk_version_targeting.is_default:
        return MAX_SDK
    min_sdk = get_min_sdk(sdk_version_targeting)
    return min(
        (sdk.min for sdk in sdk_version_targeting.alternatives if sdk.min > min_sdk),
        default=MAX_SDK,
    )


def is_64_bit(abi: Abi) -> bool:
    """Whether ``abi`` is a 64-bit architecture."""
    return abi.is_64_bit


def dimension_values(dimension_targeting: DimensionTargeting | None) -> frozenset:
    """Primary values of a dimension targeting, empty when unset."""
    if dimension_targeting is None:
        return frozenset()
    return dimension_targeting.value  # type: ignore[attr-defined]
