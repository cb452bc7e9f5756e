# ============================================================================
# CLIENT MODULE
# ============================================================================
# EPOCH: 1 - UPLET REPORTING
# STATUS: Core - Orchestrator reporting components
# PURPOSE: HTTP client, mock and factory for orchestrator reporting
# CREATED: 18 OCT 2026
# ============================================================================
"""
Client Module

Components a worker uses to report uplet progress:
- orchestrator: Orchestrator interface, HTTP client and error types
- mock: In-memory Orchestrator for tests
- factory: Configuration-driven client selection
"""

from client.orchestrator import (
    ROUTE_STATUS_UPDATE,
    ROUTE_LEARN_RESULT,
    ROUTE_PRED_RESULT,
    Orchestrator,
    OrchestratorAPI,
    OrchestratorError,
    ValidationError,
    RequestConstructionError,
    TransportError,
    UnexpectedStatusError,
)
from client.mock import (
    OrchestratorAPIMock,
    UpletNotFoundError,
    MockCall,
)
from client.factory import create_orchestrator
from __version__ import __version__

__all__ = [
    "__version__",
    # Routes
    "ROUTE_STATUS_UPDATE",
    "ROUTE_LEARN_RESULT",
    "ROUTE_PRED_RESULT",
    # Clients
    "Orchestrator",
    "OrchestratorAPI",
    "OrchestratorAPIMock",
    "MockCall",
    "create_orchestrator",
    # Errors
    "OrchestratorError",
    "ValidationError",
    "RequestConstructionError",
    "TransportError",
    "UnexpectedStatusError",
    "UpletNotFoundError",
]
