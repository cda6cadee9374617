"""
ABI splitter.

Divides the native libraries of a module into one split per processor
architecture, with alternatives set so that an installer picks exactly one
of them per device.
"""

from __future__ import annotations

from ..core.config import Config
from ..core.exceptions import ConfigurationError
from ..core.logging import get_logger, splitting_context
from ..models.module import ManifestMutator, ModuleEntry, ModuleSplit, TargetedNativeDirectory
from ..models.targeting import Abi, AbiTargeting, NativeDirectoryTargeting, TargetingDimension
from ..targeting.utils import is_64_bit
from .base import ModuleSplitSplitter

logger = get_logger(__name__)


class AbiNativeLibrariesSplitter(ModuleSplitSplitter):
    """Splits the native libraries in a module by ABI.

    Directories are grouped by their targeting; every retained group becomes
    a non-master split and anything not claimed by a group is returned in a
    final split carrying the original targeting.
    """

    def __init__(self, include_64_bit_libs: bool = True) -> None:
        """Initialize the splitter.

        Args:
            include_64_bit_libs: Generate splits for 64-bit ABIs. When False,
                64-bit libraries are dropped from the output entirely.
        """
        self.include_64_bit_libs = include_64_bit_libs

    @classmethod
    def from_config(cls, config: Config) -> AbiNativeLibrariesSplitter:
        """Create a splitter using the policy from ``config``."""
        return cls(include_64_bit_libs=config.splitter.include_64_bit_libs)

    def _is_generated(self, abi: Abi) -> bool:
        return self.include_64_bit_libs or not is_64_bit(abi)

    def split(self, module_split: ModuleSplit) -> list[ModuleSplit]:
        """Generate splits dividing the native libraries by ABI.

        Args:
            module_split: The module to divide.

        Returns:
            One split per generated ABI, in the order the ABIs first appear
            in the native configuration, followed by a split with the
            remaining entries if there are any.

        Raises:
            ConfigurationError: If 64-bit libraries are excluded and the
                module only has 64-bit native directories.
        """
        with splitting_context(module_split.module_name, TargetingDimension.ABI.value):
            return self._split(module_split)

    def _split(self, module_split: ModuleSplit) -> list[ModuleSplit]:
        if module_split.native_config is None:
            logger.debug("No native config, passing split through")
            return [module_split]

        # Only the ABI varies between native directories, so grouping by
        # targeting equality is enough.
        targeting_map: dict[NativeDirectoryTargeting, list[TargetedNativeDirectory]] = {}
        for directory in module_split.native_config.directories:
            targeting_map.setdefault(directory.targeting, []).append(directory)

        all_abis = frozenset(targeting.abi for targeting in targeting_map)
        # The exact set of generated ABIs is needed up front to set alternatives.
        abis_to_generate = frozenset(abi for abi in all_abis if self._is_generated(abi))

        if not abis_to_generate and not self.include_64_bit_libs:
            logger.error(
                "Only 64-bit native libraries present with 64-bit generation disabled",
                abis=sorted(abi.alias.value for abi in all_abis),
            )
            raise ConfigurationError(
                message=(
                    "Generation of 64-bit native libraries is disabled, but App Bundle "
                    "contains only 64-bit native libraries."
                ),
                context={"module": module_split.module_name},
                dimension=TargetingDimension.ABI.value,
                policy="include_64_bit_libs",
            )

        splits: list[ModuleSplit] = []
        # Entries not claimed by an ABI group end up in a split with the
        # original targeting.
        claimed: set[ModuleEntry] = set()
        dropped_abis: list[str] = []
        for targeting, directories in targeting_map.items():
            # Each entry goes to the first group that reaches it. A group whose
            # directory is nested in an earlier one may end up empty; it still
            # yields a split and counts as an alternative.
            entries = [
                entry
                for directory in directories
                for entry in module_split.find_entries_under_path(directory.path)
                if entry not in claimed
            ]
            entries = list(dict.fromkeys(entries))
            claimed.update(entries)

            if not self._is_generated(targeting.abi):
                dropped_abis.append(targeting.abi.alias.value)
                continue

            abi_targeting = AbiTargeting(
                value=frozenset({targeting.abi}),
                alternatives=abis_to_generate - {targeting.abi},
            )
            splits.append(
                module_split.with_changes(
                    apk_targeting=module_split.apk_targeting.with_dimension(abi_targeting),
                    master_split=False,
                    master_manifest_mutators=(
                        *module_split.master_manifest_mutators,
                        ManifestMutator.SPLITS_REQUIRED,
                    ),
                    entries=tuple(entries),
                )
            )
            logger.debug(
                "Generated ABI split",
                abi=targeting.abi.alias.value,
                entries=len(entries),
            )

        if dropped_abis:
            logger.warning(
                "Dropped 64-bit native libraries",
                abis=dropped_abis,
            )

        left_over = tuple(entry for entry in module_split.entries if entry not in claimed)
        if left_over:
            splits.append(module_split.with_changes(entries=left_over))

        logger.info(
            "Split native libraries by ABI",
            abi_splits=len(splits) - (1 if left_over else 0),
            left_over_entries=len(left_over),
        )
        return splits
