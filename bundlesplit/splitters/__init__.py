"""Dimension splitters for bundlesplit."""

from .abi import AbiNativeLibrariesSplitter
from .base import ModuleSplitSplitter

__all__ = ["AbiNativeLibrariesSplitter", "ModuleSplitSplitter"]
