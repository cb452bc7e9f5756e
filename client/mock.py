# ============================================================================
# ORCHESTRATOR MOCK
# ============================================================================
# EPOCH: 1 - UPLET REPORTING
# STATUS: Testing - In-memory stand-in for the orchestrator API
# PURPOSE: Exercise worker reporting logic without a live orchestrator
# CREATED: 18 OCT 2026
# ============================================================================
"""
Orchestrator Mock

Always accepts reports, except for one "unexisting" uplet whose UUID is
fixed at construction. Reports for that uplet fail with UpletNotFoundError,
which lets tests drive a worker down its error path deterministically.

Behavioral differences from OrchestratorAPI, kept on purpose:
- uplet type and status are NOT validated
- a result stream that fails mid-read is logged, and the call still succeeds

Accepted reports are kept in `calls` (most recent MAX_RECORDED_CALLS) for
assertions; reset() clears them. Recording never changes an outcome.
"""

from collections import deque
from typing import Deque, NamedTuple, Optional

from client.orchestrator import (
    ROUTE_LEARN_RESULT,
    ROUTE_PRED_RESULT,
    ROUTE_STATUS_UPDATE,
    Orchestrator,
    OrchestratorError,
    ResultData,
    read_chunks,
)
from core.config.defaults import DEFAULT_UNEXISTING_UPLET
from core.contracts import UpletID, enum_value
from core.logging import get_logger

logger = get_logger(__name__)

# Oldest recorded calls are dropped past this many
MAX_RECORDED_CALLS = 1000


class UpletNotFoundError(OrchestratorError):
    """Simulated 'uplet does not exist' answer."""

    def __init__(self, route: str, uplet_id: str):
        super().__init__(
            f"[orchestrator-mock][{route.lstrip('/')}] Unexisting uplet {uplet_id}",
            route=route,
            uplet_id=uplet_id,
        )


class MockCall(NamedTuple):
    """One report accepted by the mock."""
    operation: str
    uplet_id: str
    uplet_type: Optional[str] = None
    status: Optional[str] = None
    body: Optional[str] = None


class OrchestratorAPIMock(Orchestrator):
    """In-memory Orchestrator that never touches the network."""

    def __init__(self, unexisting_uplet: str = DEFAULT_UNEXISTING_UPLET):
        self._unexisting_uplet = str(unexisting_uplet)
        self.calls: Deque[MockCall] = deque(maxlen=MAX_RECORDED_CALLS)

    @property
    def unexisting_uplet(self) -> str:
        return self._unexisting_uplet

    def reset(self) -> None:
        """Forget recorded calls."""
        self.calls.clear()

    def update_uplet_status(self, uplet_type: str, status: str, uplet_id: UpletID) -> None:
        """Log and accept, unless uplet_id is the unexisting uplet."""
        uplet_id = str(uplet_id)
        if uplet_id == self._unexisting_uplet:
            raise UpletNotFoundError(ROUTE_STATUS_UPDATE, uplet_id)

        uplet_type = enum_value(uplet_type)
        status = enum_value(status)
        logger.info(
            f"[orchestrator-mock] Received update status for {uplet_type}-uplet "
            f"{uplet_id}. Status: {status}"
        )
        self.calls.append(MockCall("update_status", uplet_id, uplet_type, status))

    def _receive_result(self, route: str, kind: str, uplet_id: UpletID, data: ResultData) -> None:
        uplet_id = str(uplet_id)
        if uplet_id == self._unexisting_uplet:
            raise UpletNotFoundError(route, uplet_id)

        chunks = []
        drain_error = None
        try:
            if isinstance(data, (bytes, bytearray)):
                chunks.append(bytes(data))
            else:
                stream = read_chunks(data) if hasattr(data, "read") else data
                for chunk in stream:
                    chunks.append(chunk)
        except Exception as e:
            drain_error = e

        body = b"".join(chunks).decode("utf-8", errors="replace")
        logger.info(
            f"[orchestrator-mock] Received {kind} result for {kind}-uplet {uplet_id}: \n {body}"
        )
        # Drain failures are reported in the log only; the call still succeeds
        if drain_error is not None:
            logger.error(f"[orchestrator-mock] Error reading {kind} result: {drain_error}")
        self.calls.append(MockCall(route.lstrip("/"), uplet_id, kind, body=body))

    def post_learn_result(self, learnuplet_id: UpletID, data: ResultData) -> None:
        """Drain and log the learn result, unless learnuplet_id is the unexisting uplet."""
        self._receive_result(ROUTE_LEARN_RESULT, "learn", learnuplet_id, data)

    def post_pred_result(self, preduplet_id: UpletID, data: ResultData) -> None:
        self._receive_result(ROUTE_PRED_RESULT, "pred", preduplet_id, data)


__all__ = [
    "MAX_RECORDED_CALLS",
    "UpletNotFoundError",
    "MockCall",
    "OrchestratorAPIMock",
]
