# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# EPOCH: 1 - UPLET REPORTING
# STATUS: Foundation - Uplet enums and request payload contracts
# PURPOSE: Define the fixed uplet type/status sets consumed by validation
# CREATED: 18 OCT 2026
# ============================================================================
"""
Base contracts for orchestrator reporting.

An uplet is a unit of work tracked by the orchestrator: either a learn task
("learnuplet") or a prediction task ("preduplet"). Workers report two things
about an uplet:

- its status, as a small JSON document {"status": "<status>"}
- its result, as an opaque JSON document forwarded byte-for-byte

The enums below are the fixed sets the orchestrator accepts. The frozensets
are what the client validates against before building a request.
"""

import uuid
from enum import Enum
from typing import FrozenSet, Union

from pydantic import BaseModel, Field


# ============================================================================
# ENUMS
# ============================================================================

class UpletType(str, Enum):
    """Kind of uplet, used as a path segment in status update routes."""
    LEARN = "learn"
    PRED = "pred"


class UpletStatus(str, Enum):
    """
    Uplet lifecycle states.

    State transitions (driven by the orchestrator and workers):
        WAITING -> TODO -> PENDING -> DONE
                                   -> FAILED
                -> CANCELED
    """
    WAITING = "waiting"          # Dependencies not yet available
    TODO = "todo"                # Ready to be picked up by a worker
    PENDING = "pending"          # Worker is computing
    DONE = "done"                # Result posted
    FAILED = "failed"            # Worker gave up
    CANCELED = "canceled"        # Withdrawn before completion


VALID_UPLET_TYPES: FrozenSet[str] = frozenset(t.value for t in UpletType)
VALID_STATUSES: FrozenSet[str] = frozenset(s.value for s in UpletStatus)

UpletID = Union[uuid.UUID, str]


# ============================================================================
# PAYLOADS
# ============================================================================

class StatusUpdatePayload(BaseModel):
    """Body of POST /update_status/{uplet_type}/{uplet_id}."""
    status: str = Field(..., max_length=32, description="Target uplet status")

    model_config = {"frozen": True}

    def to_bytes(self) -> bytes:
        """Compact JSON encoding, e.g. b'{"status":"done"}'."""
        return self.model_dump_json().encode("utf-8")


def enum_value(value: Union[str, Enum]) -> str:
    """Return the plain string value of an enum member or string."""
    if isinstance(value, Enum):
        return value.value
    return value


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "UpletType",
    "UpletStatus",
    "UpletID",
    "VALID_UPLET_TYPES",
    "VALID_STATUSES",
    "StatusUpdatePayload",
    "enum_value",
]
