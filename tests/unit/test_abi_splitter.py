"""Unit tests for the ABI native libraries splitter."""

import pytest
import structlog
import structlog.testing

from bundlesplit.core import Config, ConfigurationError, SplitterConfig
from bundlesplit.models import (
    Abi,
    AbiAlias,
    ManifestMutator,
    ModuleEntry,
    ModuleSplit,
    NativeLibraries,
    TargetedNativeDirectory,
    TargetingDimension,
)
from bundlesplit.splitters import AbiNativeLibrariesSplitter
from bundlesplit.targeting import (
    get_targeting_dimensions,
    native_directory_targeting,
    sdk_version_targeting,
    targeting_of,
)


def abi(alias):
    return Abi(alias=alias)


def split_abi(split):
    (value,) = split.apk_targeting.abi_targeting.value
    return value.alias


def entry_paths(split):
    return [entry.path for entry in split.entries]


class TestPassThrough:
    """Tests for modules without native libraries."""

    def test_no_native_config_returns_input(self):
        """A module without native config is returned unchanged.

        Verifies that the single returned split is the input itself, with
        its master flag and targeting untouched.
        """
        module = ModuleSplit(entries=(ModuleEntry(path="dex/classes.dex"),))
        result = AbiNativeLibrariesSplitter().split(module)

        assert result == [module]
        assert result[0].master_split
        assert result[0].apk_targeting.is_default
        assert result[0].master_manifest_mutators == ()


class TestAbiSplits:
    """Tests for splitting with 64-bit libraries included."""

    def test_one_split_per_abi_in_first_seen_order(self, all_abis_module):
        result = AbiNativeLibrariesSplitter().split(all_abis_module)

        assert len(result) == 5
        assert [split_abi(s) for s in result[:4]] == [
            AbiAlias.ARMEABI_V7A,
            AbiAlias.ARM64_V8A,
            AbiAlias.X86,
            AbiAlias.X86_64,
        ]

    def test_abi_split_contents(self, all_abis_module):
        """Each ABI split holds exactly its directory's entries.

        Verifies that directory matching is per path component, so lib/x86
        does not claim lib/x86_64 entries.
        """
        result = AbiNativeLibrariesSplitter().split(all_abis_module)

        for split in result[:4]:
            assert entry_paths(split) == [f"lib/{split_abi(split).value}/libnative.so"]
            assert not split.master_split
            assert split.master_manifest_mutators == (ManifestMutator.SPLITS_REQUIRED,)

    def test_alternatives_are_all_other_generated_abis(self, all_abis_module):
        result = AbiNativeLibrariesSplitter().split(all_abis_module)
        generated = {abi(split_abi(s)) for s in result[:4]}

        for split in result[:4]:
            targeting = split.apk_targeting.abi_targeting
            assert targeting.alternatives == generated - targeting.value

    def test_left_over_split(self, all_abis_module):
        """Entries outside native directories go to a split with the original targeting."""
        left_over = AbiNativeLibrariesSplitter().split(all_abis_module)[-1]

        assert entry_paths(left_over) == ["dex/classes.dex", "assets/data.bin"]
        assert left_over.master_split
        assert left_over.apk_targeting == all_abis_module.apk_targeting
        assert left_over.master_manifest_mutators == ()

    def test_no_left_over_split_when_everything_is_claimed(self, make_module):
        module = make_module([AbiAlias.X86, AbiAlias.ARMEABI_V7A], extra_paths=())
        result = AbiNativeLibrariesSplitter().split(module)

        assert [split_abi(s) for s in result] == [AbiAlias.X86, AbiAlias.ARMEABI_V7A]

    def test_single_abi_has_no_alternatives(self, make_module):
        result = AbiNativeLibrariesSplitter().split(make_module([AbiAlias.X86]))

        assert result[0].apk_targeting.abi_targeting.alternatives == frozenset()

    def test_only_64_bit_abis_when_included(self, make_module):
        module = make_module([AbiAlias.ARM64_V8A, AbiAlias.X86_64], extra_paths=())
        result = AbiNativeLibrariesSplitter(include_64_bit_libs=True).split(module)

        assert [split_abi(s) for s in result] == [AbiAlias.ARM64_V8A, AbiAlias.X86_64]

    def test_module_targeting_is_extended(self, make_module):
        """ABI targeting is added on top of the module's own targeting."""
        sdk = targeting_of(sdk_version_targeting(21, [23]))
        module = make_module([AbiAlias.X86], apk_targeting=sdk)
        abi_split, left_over = AbiNativeLibrariesSplitter().split(module)

        assert get_targeting_dimensions(abi_split.apk_targeting) == {
            TargetingDimension.ABI,
            TargetingDimension.SDK_VERSION,
        }
        assert abi_split.apk_targeting.sdk_version_targeting == sdk.sdk_version_targeting
        assert left_over.apk_targeting == sdk

    def test_directories_with_same_targeting_are_grouped(self):
        """Two directories targeting the same ABI produce one split."""
        entries = (
            ModuleEntry(path="lib/x86/liba.so"),
            ModuleEntry(path="lib/arm64-v8a/liba.so"),
            ModuleEntry(path="extra/x86/libb.so"),
        )
        module = ModuleSplit(
            entries=entries,
            native_config=NativeLibraries(
                directories=(
                    TargetedNativeDirectory(
                        path="lib/x86", targeting=native_directory_targeting(AbiAlias.X86)
                    ),
                    TargetedNativeDirectory(
                        path="lib/arm64-v8a",
                        targeting=native_directory_targeting(AbiAlias.ARM64_V8A),
                    ),
                    TargetedNativeDirectory(
                        path="extra/x86", targeting=native_directory_targeting(AbiAlias.X86)
                    ),
                )
            ),
        )
        result = AbiNativeLibrariesSplitter().split(module)

        assert len(result) == 2
        assert split_abi(result[0]) == AbiAlias.X86
        assert entry_paths(result[0]) == ["lib/x86/liba.so", "extra/x86/libb.so"]
        assert entry_paths(result[1]) == ["lib/arm64-v8a/liba.so"]

    def test_input_is_not_modified(self, all_abis_module):
        snapshot = all_abis_module.model_copy(deep=True)
        AbiNativeLibrariesSplitter().split(all_abis_module)

        assert all_abis_module == snapshot

    def test_split_is_deterministic(self, all_abis_module):
        splitter = AbiNativeLibrariesSplitter()
        assert splitter.split(all_abis_module) == splitter.split(all_abis_module)


class TestPartitionCompleteness:
    """Tests that entries are neither lost nor duplicated."""

    @pytest.mark.parametrize(
        "abis,extra_paths",
        [
            ([AbiAlias.X86], ()),
            ([AbiAlias.X86, AbiAlias.MIPS], ("dex/classes.dex",)),
            (
                [AbiAlias.ARMEABI, AbiAlias.ARMEABI_V7A, AbiAlias.ARM64_V8A, AbiAlias.X86_64],
                ("dex/classes.dex", "res/layout/main.xml", "root/lib/x86/readme.txt"),
            ),
        ],
    )
    def test_union_of_entries_equals_input(self, make_module, abis, extra_paths):
        module = make_module(abis, extra_paths=extra_paths)
        result = AbiNativeLibrariesSplitter().split(module)

        all_entries = [entry for split in result for entry in split.entries]
        assert len(all_entries) == len(set(all_entries))
        assert set(all_entries) == set(module.entries)

    def test_overlapping_directories_claim_entries_once(self):
        """An entry under two native directories lands in the first group only."""
        entries = (ModuleEntry(path="lib/x86/sub/liba.so"),)
        module = ModuleSplit(
            entries=entries,
            native_config=NativeLibraries(
                directories=(
                    TargetedNativeDirectory(
                        path="lib/x86", targeting=native_directory_targeting(AbiAlias.X86)
                    ),
                    TargetedNativeDirectory(
                        path="lib/x86/sub", targeting=native_directory_targeting(AbiAlias.MIPS)
                    ),
                )
            ),
        )
        x86, mips = AbiNativeLibrariesSplitter().split(module)

        assert entry_paths(x86) == ["lib/x86/sub/liba.so"]
        assert mips.entries == ()


class TestExclude64Bit:
    """Tests for splitting with 64-bit libraries excluded."""

    def test_64_bit_splits_are_dropped(self, all_abis_module):
        """64-bit ABIs produce no split and their libraries disappear.

        Verifies that alternatives only list the ABIs that are generated.
        """
        result = AbiNativeLibrariesSplitter(include_64_bit_libs=False).split(all_abis_module)

        assert len(result) == 3
        v7a, x86, left_over = result
        assert split_abi(v7a) == AbiAlias.ARMEABI_V7A
        assert v7a.apk_targeting.abi_targeting.alternatives == {abi(AbiAlias.X86)}
        assert x86.apk_targeting.abi_targeting.alternatives == {abi(AbiAlias.ARMEABI_V7A)}
        assert entry_paths(left_over) == ["dex/classes.dex", "assets/data.bin"]

    def test_only_64_bit_raises(self, make_module):
        module = make_module([AbiAlias.ARM64_V8A, AbiAlias.X86_64])

        with pytest.raises(ConfigurationError) as exc_info:
            AbiNativeLibrariesSplitter(include_64_bit_libs=False).split(module)

        assert "64-bit" in exc_info.value.message
        assert exc_info.value.dimension == "ABI"
        assert exc_info.value.policy == "include_64_bit_libs"

    def test_no_native_config_with_exclusion_passes_through(self):
        module = ModuleSplit(entries=(ModuleEntry(path="dex/classes.dex"),))
        assert AbiNativeLibrariesSplitter(include_64_bit_libs=False).split(module) == [module]

    def test_empty_native_config_with_exclusion_raises(self):
        """With no native directories there is no ABI to generate."""
        module = ModuleSplit(
            entries=(ModuleEntry(path="dex/classes.dex"),),
            native_config=NativeLibraries(),
        )
        with pytest.raises(ConfigurationError):
            AbiNativeLibrariesSplitter(include_64_bit_libs=False).split(module)

    def test_empty_native_config_passes_entries_through(self):
        """With 64-bit included, all entries land in the left-over split."""
        module = ModuleSplit(
            entries=(ModuleEntry(path="dex/classes.dex"), ModuleEntry(path="assets/a.bin")),
            native_config=NativeLibraries(),
        )
        assert AbiNativeLibrariesSplitter(include_64_bit_libs=True).split(module) == [module]


class TestFromConfig:
    """Tests for building the splitter from configuration."""

    def test_policy_is_read_from_config(self):
        config = Config(splitter=SplitterConfig(include_64_bit_libs=False))
        assert not AbiNativeLibrariesSplitter.from_config(config).include_64_bit_libs

    def test_default_config_includes_64_bit(self):
        assert AbiNativeLibrariesSplitter.from_config(Config()).include_64_bit_libs


class TestSplitLogging:
    """Tests for the events emitted by a splitting pass."""

    def test_summary_event_is_logged(self, all_abis_module):
        with structlog.testing.capture_logs() as logs:
            AbiNativeLibrariesSplitter().split(all_abis_module)

        summary = [e for e in logs if e["event"] == "Split native libraries by ABI"]
        assert summary == [
            {
                "event": "Split native libraries by ABI",
                "log_level": "info",
                "abi_splits": 4,
                "left_over_entries": 2,
            }
        ]

    def test_context_is_unbound_after_split(self, all_abis_module):
        AbiNativeLibrariesSplitter().split(all_abis_module)
        assert structlog.contextvars.get_contextvars() == {}
