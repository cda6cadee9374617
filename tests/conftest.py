"""Test configuration for bundlesplit."""

import pytest

from bundlesplit.models import (
    AbiAlias,
    ModuleEntry,
    ModuleSplit,
    NativeLibraries,
    TargetedNativeDirectory,
)
from bundlesplit.targeting import native_directory_targeting


def _native_directory(alias: AbiAlias, path: str | None = None) -> TargetedNativeDirectory:
    return TargetedNativeDirectory(
        path=path or f"lib/{alias.value}",
        targeting=native_directory_targeting(alias),
    )


@pytest.fixture
def make_module():
    """Build a module with one library per ABI plus extra non-native entries.

    Returns:
        Callable: ``make_module(abis, extra_paths=(...), **fields)`` returning
            a ModuleSplit whose native config lists ``lib/<abi>`` for every
            ABI in ``abis``, in that order.
    """

    def _make(abis, extra_paths=("dex/classes.dex", "assets/data.bin"), **fields):
        entries = [ModuleEntry(path=f"lib/{alias.value}/libnative.so") for alias in abis]
        entries += [ModuleEntry(path=path) for path in extra_paths]
        return ModuleSplit(
            entries=tuple(entries),
            native_config=NativeLibraries(
                directories=tuple(_native_directory(alias) for alias in abis)
            ),
            **fields,
        )

    return _make


@pytest.fixture
def all_abis_module(make_module):
    """Module with 32-bit and 64-bit ARM and x86 libraries.

    Returns:
        ModuleSplit: A module targeting armeabi-v7a, arm64-v8a, x86 and x86_64.
    """
    return make_module(
        [AbiAlias.ARMEABI_V7A, AbiAlias.ARM64_V8A, AbiAlias.X86, AbiAlias.X86_64]
    )
