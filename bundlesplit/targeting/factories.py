"""
Convenience constructors for targeting records.

Each dimension factory accepts either a single value (alias, code or model)
or an iterable of them for both the values and the alternatives.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel

from ..models.targeting import (
    Abi,
    AbiAlias,
    AbiTargeting,
    DensityAlias,
    DimensionTargeting,
    GraphicsApi,
    GraphicsApiTargeting,
    LanguageTargeting,
    NativeDirectoryTargeting,
    OpenGlVersion,
    ScreenDensity,
    ScreenDensityTargeting,
    SdkVersion,
    SdkVersionTargeting,
    Targeting,
    TextureCompressionFormat,
    TextureCompressionFormatAlias,
    TextureCompressionFormatTargeting,
    VulkanVersion,
)

V = TypeVar("V")


def _as_set(items: Any, convert: Callable[[Any], V]) -> frozenset[V]:
    if items is None:
        return frozenset()
    # str, enum members and models are single values even when iterable
    if isinstance(items, (str, Enum, BaseModel)) or not isinstance(items, Iterable):
        items = [items]
    return frozenset(convert(item) for item in items)


def _abi(item: Abi | AbiAlias | str) -> Abi:
    return item if isinstance(item, Abi) else Abi(alias=AbiAlias(item))


def _texture(item: TextureCompressionFormat | TextureCompressionFormatAlias | str) -> TextureCompressionFormat:
    if isinstance(item, TextureCompressionFormat):
        return item
    return TextureCompressionFormat(alias=TextureCompressionFormatAlias(item))


def _sdk(item: SdkVersion | int) -> SdkVersion:
    return item if isinstance(item, SdkVersion) else sdk_version_from(item)


def _density(item: ScreenDensity | DensityAlias | int) -> ScreenDensity:
    if isinstance(item, ScreenDensity):
        return item
    if isinstance(item, int):
        return ScreenDensity(density_dpi=item)
    return ScreenDensity(density_alias=DensityAlias(item))


def abi_targeting(value: Any = None, alternatives: Any = None) -> AbiTargeting:
    return AbiTargeting(value=_as_set(value, _abi), alternatives=_as_set(alternatives, _abi))


def language_targeting(value: Any = None, alternatives: Any = None) -> LanguageTargeting:
    return LanguageTargeting(value=_as_set(value, str), alternatives=_as_set(alternatives, str))


def texture_compression_targeting(
    value: Any = None, alternatives: Any = None
) -> TextureCompressionFormatTargeting:
    return TextureCompressionFormatTargeting(
        value=_as_set(value, _texture), alternatives=_as_set(alternatives, _texture)
    )


def graphics_api_targeting(
    value: GraphicsApi | Iterable[GraphicsApi] | None = None,
    alternatives: GraphicsApi | Iterable[GraphicsApi] | None = None,
) -> GraphicsApiTargeting:
    return GraphicsApiTargeting(
        value=_as_set(value, lambda api: api), alternatives=_as_set(alternatives, lambda api: api)
    )


def sdk_version_targeting(value: Any = None, alternatives: Any = None) -> SdkVersionTargeting:
    return SdkVersionTargeting(value=_as_set(value, _sdk), alternatives=_as_set(alternatives, _sdk))


def screen_density_targeting(value: Any = None, alternatives: Any = None) -> ScreenDensityTargeting:
    return ScreenDensityTargeting(
        value=_as_set(value, _density), alternatives=_as_set(alternatives, _density)
    )


def sdk_version_from(min_sdk: int) -> SdkVersion:
    return SdkVersion(min=min_sdk)


def open_gl_version_from(major: int, minor: int = 0) -> GraphicsApi:
    return GraphicsApi(min_open_gl_version=OpenGlVersion(major=major, minor=minor))


def vulkan_version_from(major: int, minor: int = 0) -> GraphicsApi:
    return GraphicsApi(min_vulkan_version=VulkanVersion(major=major, minor=minor))


def targeting_of(*dimension_targetings: DimensionTargeting) -> Targeting:
    """Wrap dimension targetings into a single record.

    Later arguments replace earlier ones for the same dimension; use
    ``merge_targeting`` to union them instead.
    """
    targeting = Targeting()
    for dimension_targeting in dimension_targetings:
        targeting = targeting.with_dimension(dimension_targeting)
    return targeting


def native_directory_targeting(abi: Abi | AbiAlias | str) -> NativeDirectoryTargeting:
    return NativeDirectoryTargeting(abi=_abi(abi))
