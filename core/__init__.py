# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - UPLET REPORTING
# STATUS: Core module initialization
# PURPOSE: Export uplet contracts shared by the client and its mock
# CREATED: 18 OCT 2026
# ============================================================================

from core.contracts import (
    UpletType,
    UpletStatus,
    UpletID,
    VALID_UPLET_TYPES,
    VALID_STATUSES,
    StatusUpdatePayload,
)

__all__ = [
    # Enums
    "UpletType",
    "UpletStatus",
    "UpletID",
    "VALID_UPLET_TYPES",
    "VALID_STATUSES",
    # Payloads
    "StatusUpdatePayload",
]
