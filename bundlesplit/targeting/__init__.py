"""Targeting record utilities for bundlesplit."""

from .factories import (
    abi_targeting,
    graphics_api_targeting,
    language_targeting,
    native_directory_targeting,
    open_gl_version_from,
    screen_density_targeting,
    sdk_version_from,
    sdk_version_targeting,
    targeting_of,
    texture_compression_targeting,
    vulkan_version_from,
)
from .utils import (
    DEFAULT_MIN_SDK,
    MAX_SDK,
    dimension_values,
    generate_all_variant_targetings,
    get_max_sdk,
    get_min_sdk,
    get_targeting_dimensions,
    is_64_bit,
    merge_targeting,
)

__all__ = [
    "DEFAULT_MIN_SDK",
    "MAX_SDK",
    "abi_targeting",
    "dimension_values",
    "generate_all_variant_targetings",
    "get_max_sdk",
    "get_min_sdk",
    "get_targeting_dimensions",
    "graphics_api_targeting",
    "is_64_bit",
    "language_targeting",
    "merge_targeting",
    "native_directory_targeting",
    "open_gl_version_from",
    "screen_density_targeting",
    "sdk_version_from",
    "sdk_version_targeting",
    "targeting_of",
    "texture_compression_targeting",
    "vulkan_version_from",
]
