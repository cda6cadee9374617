"""
Exception hierarchy for bundlesplit.

All exceptions inherit from BundleSplitError so callers can handle every
user-facing failure of a splitting pass in one place. Each exception carries
context for logging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class BundleSplitError(Exception):
    """Base exception for all bundlesplit errors."""

    message: str
    context: dict[str, Any] = field(default_factory=dict)
    cause: Exception | None = None

    def __str__(self) -> str:
        ctx = f" | context: {self.context}" if self.context else ""
        cause = f" | caused by: {self.cause}" if self.cause else ""
        return f"{self.message}{ctx}{cause}"


@dataclass
class ConfigurationError(BundleSplitError):
    """Raised when a splitting policy leaves no variant to generate.

    The condition is deterministic for a given module and policy, so it is
    never retried: either the policy or the module has to change.
    """

    dimension: str = ""
    policy: str = ""

    def __str__(self) -> str:
        base = super().__str__()
        if self.dimension:
            return f"[{self.dimension}] policy '{self.policy}': {base}"
        return base
