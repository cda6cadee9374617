"""
Targeting models.

A targeting record describes which device configurations a piece of content
is meant for. Every dimension carries a set of primary values and a set of
alternatives, the sibling values that other splits of the same pass target.
All models are frozen so they can be used as dictionary keys and set members.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TargetingDimension(str, Enum):
    """Axes of device variation a split can target."""

    ABI = "ABI"
    LANGUAGE = "LANGUAGE"
    TEXTURE_COMPRESSION_FORMAT = "TEXTURE_COMPRESSION_FORMAT"
    GRAPHICS_API = "GRAPHICS_API"
    SDK_VERSION = "SDK_VERSION"
    SCREEN_DENSITY = "SCREEN_DENSITY"


class AbiAlias(str, Enum):
    """Processor architectures native libraries can be built for."""

    ARMEABI = "armeabi"
    ARMEABI_V7A = "armeabi-v7a"
    ARM64_V8A = "arm64-v8a"
    X86 = "x86"
    X86_64 = "x86_64"
    MIPS = "mips"
    MIPS64 = "mips64"


_64_BIT_ABIS = frozenset({AbiAlias.ARM64_V8A, AbiAlias.X86_64, AbiAlias.MIPS64})


class TextureCompressionFormatAlias(str, Enum):
    """GPU texture compression formats."""

    ETC1_RGB8 = "etc1_rgb8"
    PALETTED = "paletted"
    THREE_DC = "3dc"
    ATC = "atc"
    LATC = "latc"
    DXT1 = "dxt1"
    S3TC = "s3tc"
    PVRTC = "pvrtc"
    ASTC = "astc"
    ETC2 = "etc2"


class DensityAlias(str, Enum):
    """Named screen density buckets."""

    NODPI = "nodpi"
    LDPI = "ldpi"
    MDPI = "mdpi"
    TVDPI = "tvdpi"
    HDPI = "hdpi"
    XHDPI = "xhdpi"
    XXHDPI = "xxhdpi"
    XXXHDPI = "xxxhdpi"


class _Value(BaseModel):
    model_config = ConfigDict(frozen=True)


class Abi(_Value):
    """A single processor architecture."""

    alias: AbiAlias = Field(description="Architecture identifier")

    @property
    def is_64_bit(self) -> bool:
        """Whether the architecture is a 64-bit one."""
        return self.alias in _64_BIT_ABIS


class TextureCompressionFormat(_Value):
    """A texture compression format."""

    alias: TextureCompressionFormatAlias


class OpenGlVersion(_Value):
    """An OpenGL ES version."""

    major: int = Field(default=0, ge=0)
    minor: int = Field(default=0, ge=0)


class VulkanVersion(_Value):
    """A Vulkan version."""

    major: int = Field(default=0, ge=0)
    minor: int = Field(default=0, ge=0)


class GraphicsApi(_Value):
    """Minimum graphics API version, either OpenGL ES or Vulkan."""

    min_open_gl_version: OpenGlVersion | None = None
    min_vulkan_version: VulkanVersion | None = None

    @model_validator(mode="after")
    def _check_single_api(self) -> GraphicsApi:
        if (self.min_open_gl_version is None) == (self.min_vulkan_version is None):
            raise ValueError("exactly one of min_open_gl_version or min_vulkan_version must be set")
        return self


class SdkVersion(_Value):
    """Minimum platform API level."""

    min: int = Field(ge=1, description="Minimum API level (inclusive)")


class ScreenDensity(_Value):
    """A screen density, as a named bucket or a raw dpi value."""

    density_alias: DensityAlias | None = None
    density_dpi: int | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def _check_single_form(self) -> ScreenDensity:
        if (self.density_alias is None) == (self.density_dpi is None):
            raise ValueError("exactly one of density_alias or density_dpi must be set")
        return self


class DimensionTargeting(BaseModel):
    """Primary values and alternatives along one dimension.

    Subclasses declare ``value`` and ``alternatives`` with the value type of
    their dimension. The two sets must be disjoint.
    """

    model_config = ConfigDict(frozen=True)

    dimension: ClassVar[TargetingDimension]

    @model_validator(mode="after")
    def _check_disjoint(self) -> DimensionTargeting:
        overlap = self.value & self.alternatives  # type: ignore[attr-defined]
        if overlap:
            raise ValueError(f"values {sorted(map(str, overlap))} are also listed as alternatives")
        return self

    @property
    def is_default(self) -> bool:
        """True when neither values nor alternatives are set."""
        return not self.value and not self.alternatives  # type: ignore[attr-defined]


class AbiTargeting(DimensionTargeting):
    dimension: ClassVar[TargetingDimension] = TargetingDimension.ABI

    value: frozenset[Abi] = frozenset()
    alternatives: frozenset[Abi] = frozenset()


class LanguageTargeting(DimensionTargeting):
    dimension: ClassVar[TargetingDimension] = TargetingDimension.LANGUAGE

    value: frozenset[str] = frozenset()
    alternatives: frozenset[str] = frozenset()


class TextureCompressionFormatTargeting(DimensionTargeting):
    dimension: ClassVar[TargetingDimension] = TargetingDimension.TEXTURE_COMPRESSION_FORMAT

    value: frozenset[TextureCompressionFormat] = frozenset()
    alternatives: frozenset[TextureCompressionFormat] = frozenset()


class GraphicsApiTargeting(DimensionTargeting):
    dimension: ClassVar[TargetingDimension] = TargetingDimension.GRAPHICS_API

    value: frozenset[GraphicsApi] = frozenset()
    alternatives: frozenset[GraphicsApi] = frozenset()


class SdkVersionTargeting(DimensionTargeting):
    dimension: ClassVar[TargetingDimension] = TargetingDimension.SDK_VERSION

    value: frozenset[SdkVersion] = frozenset()
    alternatives: frozenset[SdkVersion] = frozenset()


class ScreenDensityTargeting(DimensionTargeting):
    dimension: ClassVar[TargetingDimension] = TargetingDimension.SCREEN_DENSITY

    value: frozenset[ScreenDensity] = frozenset()
    alternatives: frozenset[ScreenDensity] = frozenset()


DIMENSION_FIELDS: dict[TargetingDimension, str] = {
    TargetingDimension.ABI: "abi_targeting",
    TargetingDimension.LANGUAGE: "language_targeting",
    TargetingDimension.TEXTURE_COMPRESSION_FORMAT: "texture_compression_format_targeting",
    TargetingDimension.GRAPHICS_API: "graphics_api_targeting",
    TargetingDimension.SDK_VERSION: "sdk_version_targeting",
    TargetingDimension.SCREEN_DENSITY: "screen_density_targeting",
}

DIMENSION_TYPES: dict[TargetingDimension, type[DimensionTargeting]] = {
    cls.dimension: cls
    for cls in (
        AbiTargeting,
        LanguageTargeting,
        TextureCompressionFormatTargeting,
        GraphicsApiTargeting,
        SdkVersionTargeting,
        ScreenDensityTargeting,
    )
}


class Targeting(BaseModel):
    """A targeting record: zero or more dimensions with values and alternatives.

    Unset dimensions are stored as None; a default (empty) dimension targeting
    is normalised to None so that records compare equal regardless of how
    they were built. A record with no dimension set matches every device.
    """

    model_config = ConfigDict(frozen=True)

    abi_targeting: AbiTargeting | None = None
    language_targeting: LanguageTargeting | None = None
    texture_compression_format_targeting: TextureCompressionFormatTargeting | None = None
    graphics_api_targeting: GraphicsApiTargeting | None = None
    sdk_version_targeting: SdkVersionTargeting | None = None
    screen_density_targeting: ScreenDensityTargeting | None = None

    @field_validator(*DIMENSION_FIELDS.values(), mode="after")
    @classmethod
    def _drop_default(cls, value: DimensionTargeting | None) -> DimensionTargeting | None:
        if value is not None and value.is_default:
            return None
        return value

    @property
    def is_default(self) -> bool:
        """True when no dimension is set."""
        return all(self.get(dimension) is None for dimension in TargetingDimension)

    def get(self, dimension: TargetingDimension) -> DimensionTargeting | None:
        """Return the targeting for ``dimension``, or None if unset."""
        return getattr(self, DIMENSION_FIELDS[dimension])

    def with_dimension(self, dimension_targeting: DimensionTargeting) -> Targeting:
        """Return a copy with one dimension replaced."""
        field_name = DIMENSION_FIELDS[dimension_targeting.dimension]
        update: dict[str, Any] = {
            field_name: None if dimension_targeting.is_default else dimension_targeting
        }
        return self.model_copy(update=update)


class NativeDirectoryTargeting(BaseModel):
    """Targeting of a native library directory; always exactly one ABI."""

    model_config = ConfigDict(frozen=True)

    abi: Abi
