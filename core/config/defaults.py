# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - UPLET REPORTING
# STATUS: Core - Default configuration values
# PURPOSE: Orchestrator connection settings with environment overrides
# CREATED: 18 OCT 2026
# ============================================================================
"""
Configuration Defaults

Connection settings for the orchestrator client. Values can be passed
explicitly to the client, or loaded from environment variables here.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass
from typing import Optional


# Sentinel uplet the mock reports as missing
DEFAULT_UNEXISTING_UPLET = "ea408171-0205-475e-8962-a02855767260"


def _parse_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class OrchestratorDefaults:
    """
    Defaults for reaching the orchestrator HTTP API.

    timeout_seconds of None means no client-side deadline.
    """
    host: str = "localhost"
    port: int = 8080
    timeout_seconds: Optional[float] = None

    # Local testing
    use_mock: bool = False
    unexisting_uplet: str = DEFAULT_UNEXISTING_UPLET

    @classmethod
    def from_env(cls) -> "OrchestratorDefaults":
        """Create from environment variables."""
        timeout = os.getenv("ORCHESTRATOR_TIMEOUT")
        return cls(
            host=os.getenv("ORCHESTRATOR_HOST", "localhost"),
            port=int(os.getenv("ORCHESTRATOR_PORT", 8080)),
            timeout_seconds=float(timeout) if timeout else None,
            use_mock=_parse_bool(os.getenv("ORCHESTRATOR_MOCK")),
            unexisting_uplet=os.getenv(
                "ORCHESTRATOR_MOCK_UNEXISTING_UPLET", DEFAULT_UNEXISTING_UPLET
            ),
        )


# ============================================================================
# SINGLETON
# ============================================================================

_defaults: Optional[OrchestratorDefaults] = None


def get_defaults() -> OrchestratorDefaults:
    """Get the process-wide defaults, loading from env on first use."""
    global _defaults
    if _defaults is None:
        _defaults = OrchestratorDefaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Forget cached defaults so the next get_defaults() re-reads env."""
    global _defaults
    _defaults = None


__all__ = [
    "DEFAULT_UNEXISTING_UPLET",
    "OrchestratorDefaults",
    "get_defaults",
    "reset_defaults",
]
