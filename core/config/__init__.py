# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - UPLET REPORTING
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 18 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for the orchestrator client.
"""

from core.config.defaults import (
    DEFAULT_UNEXISTING_UPLET,
    OrchestratorDefaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "DEFAULT_UNEXISTING_UPLET",
    "OrchestratorDefaults",
    "get_defaults",
    "reset_defaults",
]
