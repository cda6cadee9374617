"""
Splitter interface.

A splitter takes one module split and divides it along a single targeting
dimension, returning the resulting splits.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models.module import ModuleSplit


class ModuleSplitSplitter(ABC):
    """Abstract splitter interface."""

    @abstractmethod
    def split(self, module_split: ModuleSplit) -> list[ModuleSplit]:
        """Divide a module split along the splitter's dimension.

        Args:
            module_split: The split to divide. It is never modified.

        Returns:
            The resulting splits. Every entry of the input appears in at most
            one of them.

        Raises:
            ConfigurationError: If the splitter's policy rules out every
                variant of the module.
        """
        ...
