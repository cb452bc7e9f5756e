# ============================================================================
# CONTRACTS & LOGGING TESTS
# ============================================================================
# EPOCH: 1 - UPLET REPORTING
# STATUS: Tests - Enums, payload encoding, context logging
# PURPOSE: Verify the shared contracts and log context plumbing
# CREATED: 18 OCT 2026
# ============================================================================
"""
Contracts & Logging Tests

Run with:
    pytest tests/test_contracts_logging.py -v
"""

import logging
import uuid

import httpx
import pytest

from client.orchestrator import OrchestratorAPI, TransportError, UnexpectedStatusError
from core.contracts import (
    StatusUpdatePayload,
    UpletStatus,
    UpletType,
    VALID_STATUSES,
    VALID_UPLET_TYPES,
)
from core.logging import current_context, get_logger, log_context


UPLET_ID = uuid.UUID("0f4d6a52-31c4-4b8e-9b6e-7d2a1c5e9f30")


# ============================================================================
# CONTRACTS
# ============================================================================

class TestContracts:

    def test_valid_sets_match_enums(self):
        assert VALID_UPLET_TYPES == {"learn", "pred"}
        assert VALID_STATUSES == {s.value for s in UpletStatus}
        assert isinstance(VALID_STATUSES, frozenset)

    def test_str_enum_compares_to_value(self):
        assert UpletType.LEARN == "learn"

    def test_status_payload_is_compact_json(self):
        assert StatusUpdatePayload(status="done").to_bytes() == b'{"status":"done"}'

    def test_status_payload_is_frozen(self):
        payload = StatusUpdatePayload(status="todo")
        with pytest.raises(Exception):
            payload.status = "done"


# ============================================================================
# LOG CONTEXT
# ============================================================================

class TestLogContext:

    def test_nested_contexts_merge_and_unwind(self):
        with log_context(uplet_id=UPLET_ID, uplet_type="learn"):
            with log_context(route="/update_status"):
                assert current_context() == {
                    "uplet_id": str(UPLET_ID),
                    "uplet_type": "learn",
                    "route": "/update_status",
                }
            assert "route" not in current_context()
        assert current_context() == {}

    def test_unknown_field_rejected(self):
        with pytest.raises(TypeError):
            with log_context(job_id="j1"):
                pass

    def test_context_logger_attaches_context(self, caplog):
        logger = get_logger("tests.logging")
        caplog.set_level(logging.INFO, logger="tests.logging")

        with log_context(uplet_id="u9"):
            logger.info("reported", extra={"url": "http://orch/x"})

        record = caplog.records[-1]
        assert record.getMessage() == "reported"
        assert record.extra == {"uplet_id": "u9", "url": "http://orch/x"}


class TestClientLogRecords:
    """Failure records from the client carry the uplet, route and url."""

    def test_unexpected_status_record(self, caplog):
        client = OrchestratorAPI(
            "localhost", 8080, transport=httpx.MockTransport(lambda r: httpx.Response(503))
        )
        caplog.set_level(logging.WARNING, logger="client.orchestrator")

        with pytest.raises(UnexpectedStatusError):
            client.update_uplet_status("pred", "failed", UPLET_ID)

        record = caplog.records[-1]
        assert record.extra["uplet_id"] == str(UPLET_ID)
        assert record.extra["uplet_type"] == "pred"
        assert record.extra["route"] == "/update_status"
        assert record.extra["url"] == f"http://localhost:8080/update_status/pred/{UPLET_ID}"
        assert record.extra["status_code"] == 503

    def test_transport_failure_record(self, caplog):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        client = OrchestratorAPI("localhost", 8080, transport=httpx.MockTransport(refuse))
        caplog.set_level(logging.ERROR, logger="client.orchestrator")

        with pytest.raises(TransportError):
            client.post_learn_result(UPLET_ID, b"{}")

        record = caplog.records[-1]
        assert record.extra["route"] == "/learndone"
        assert record.extra["url"] == f"http://localhost:8080/learndone/{UPLET_ID}"


class TestVersion:

    def test_version_exported(self):
        from client import __version__

        assert __version__ == "0.1.0"
