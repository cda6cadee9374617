"""
bundlesplit data models.

Immutable pydantic models for targeting records, module content and the
splits produced from it.
"""

from .module import (
    ManifestMutator,
    ModuleEntry,
    ModuleSplit,
    NativeLibraries,
    TargetedNativeDirectory,
)
from .targeting import (
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
    TargetingDimension,
    TextureCompressionFormat,
    TextureCompressionFormatAlias,
    TextureCompressionFormatTargeting,
    VulkanVersion,
)

__all__ = [
    # Module models
    "ManifestMutator",
    "ModuleEntry",
    "ModuleSplit",
    "NativeLibraries",
    "TargetedNativeDirectory",
    # Targeting models
    "Abi",
    "AbiAlias",
    "AbiTargeting",
    "DensityAlias",
    "DimensionTargeting",
    "GraphicsApi",
    "GraphicsApiTargeting",
    "LanguageTargeting",
    "NativeDirectoryTargeting",
    "OpenGlVersion",
    "ScreenDensity",
    "ScreenDensityTargeting",
    "SdkVersion",
    "SdkVersionTargeting",
    "Targeting",
    "TargetingDimension",
    "TextureCompressionFormat",
    "TextureCompressionFormatAlias",
    "TextureCompressionFormatTargeting",
    "VulkanVersion",
]
