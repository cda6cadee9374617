"""
Module content and split models.

A ModuleSplit is both the input of a splitter (the whole module, with an
optional native library configuration) and its output (one delivery unit
with its APK targeting and entries).
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .targeting import NativeDirectoryTargeting, Targeting


class ManifestMutator(str, Enum):
    """Opaque manifest edits applied later by the APK assembler."""

    SPLITS_REQUIRED = "splits_required"


class ModuleEntry(BaseModel):
    """A file inside a module, addressed by its forward-slash path."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="Path relative to the module root, e.g. lib/x86/libfoo.so")
    content: bytes = Field(default=b"", repr=False)

    @field_validator("path")
    @classmethod
    def _normalise_path(cls, value: str) -> str:
        normalised = value.replace("\\", "/").strip("/")
        if not normalised:
            raise ValueError("entry path must not be empty")
        return normalised

    def is_under(self, directory: str) -> bool:
        """Whether this entry is ``directory`` itself or lies below it.

        Matching is per path component, so ``lib/x86`` does not contain
        ``lib/x86_64/libfoo.so``.
        """
        prefix = directory.replace("\\", "/").strip("/")
        if not prefix:
            return True
        return self.path == prefix or self.path.startswith(prefix + "/")


class TargetedNativeDirectory(BaseModel):
    """A native library directory and the ABI it targets."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="Directory path, e.g. lib/arm64-v8a")
    targeting: NativeDirectoryTargeting


class NativeLibraries(BaseModel):
    """Native library configuration of a module."""

    model_config = ConfigDict(frozen=True)

    directories: tuple[TargetedNativeDirectory, ...] = ()


class ModuleSplit(BaseModel):
    """A set of module entries with the targeting that selects them."""

    model_config = ConfigDict(frozen=True)

    module_name: str = Field(default="base", description="Name of the owning module")
    apk_targeting: Targeting = Field(default_factory=Targeting)
    master_split: bool = Field(default=True, description="Always installed, regardless of device")
    entries: tuple[ModuleEntry, ...] = ()
    native_config: NativeLibraries | None = None
    master_manifest_mutators: tuple[ManifestMutator, ...] = ()

    @field_validator("entries", mode="after")
    @classmethod
    def _dedupe_entries(cls, value: tuple[ModuleEntry, ...]) -> tuple[ModuleEntry, ...]:
        by_path: dict[str, ModuleEntry] = {}
        for entry in value:
            seen = by_path.setdefault(entry.path, entry)
            if seen != entry:
                raise ValueError(f"conflicting entries for path '{entry.path}'")
        return tuple(by_path.values())

    def find_entries_under_path(self, path: str) -> list[ModuleEntry]:
        """Return the entries located under ``path``, in module order."""
        return [entry for entry in self.entries if entry.is_under(path)]

    def with_changes(self, **changes: Any) -> ModuleSplit:
        """Return a validated copy with the given fields replaced."""
        return self.model_validate({**dict(self), **changes})
