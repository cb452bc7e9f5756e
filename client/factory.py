# ============================================================================
# ORCHESTRATOR FACTORY
# ============================================================================
# EPOCH: 1 - UPLET REPORTING
# STATUS: Core - Client selection
# PURPOSE: Build the real client or the mock from configuration
# CREATED: 18 OCT 2026
# ============================================================================
"""
Orchestrator Factory

Workers call create_orchestrator() once at startup and keep the result for
the process lifetime. Explicit arguments win over environment defaults.
"""

from typing import Optional

from client.mock import OrchestratorAPIMock
from client.orchestrator import Orchestrator, OrchestratorAPI
from core.config import OrchestratorDefaults, get_defaults
from core.logging import get_logger

logger = get_logger(__name__)


def create_orchestrator(
    hostname: Optional[str] = None,
    port: Optional[int] = None,
    use_mock: Optional[bool] = None,
    defaults: Optional[OrchestratorDefaults] = None,
) -> Orchestrator:
    """
    Create the appropriate orchestrator client based on configuration.

    Args:
        hostname: Orchestrator host (overrides ORCHESTRATOR_HOST)
        port: Orchestrator port (overrides ORCHESTRATOR_PORT)
        use_mock: Return the in-memory mock (overrides ORCHESTRATOR_MOCK)
        defaults: Configuration to fall back on; loaded from env if omitted

    Returns:
        Orchestrator instance

    Raises:
        ValueError if no host is configured for the HTTP client
    """
    defaults = defaults or get_defaults()

    if use_mock is None:
        use_mock = defaults.use_mock

    if use_mock:
        logger.info(
            f"Using orchestrator mock (unexisting uplet {defaults.unexisting_uplet})"
        )
        return OrchestratorAPIMock(unexisting_uplet=defaults.unexisting_uplet)

    hostname = hostname or defaults.host
    if not hostname:
        raise ValueError("An orchestrator hostname must be provided")
    port = port if port is not None else defaults.port

    logger.info(f"Using orchestrator API at http://{hostname}:{port}")
    return OrchestratorAPI(hostname, port, timeout=defaults.timeout_seconds)


__all__ = ["create_orchestrator"]
