# ============================================================================
# ORCHESTRATOR HTTP CLIENT
# ============================================================================
# EPOCH: 1 - UPLET REPORTING
# STATUS: Core - Sync HTTP client for the orchestrator API
# PURPOSE: Forward uplet status updates and results from workers
# CREATED: 18 OCT 2026
# ============================================================================
"""
Orchestrator HTTP Client

Sync httpx client used by workers to report back to the orchestrator:

    POST /update_status/{uplet_type}/{uplet_id}   body: {"status": "<status>"}
    POST /learndone/{learnuplet_id}               body: raw JSON result
    POST /preddone/{preduplet_id}                 body: raw JSON result

Only HTTP 200 counts as success. Every other outcome raises a subclass of
OrchestratorError naming the route, the target URL and the underlying cause.
A single attempt is made per call; retrying is up to the caller.

Uplet type and status are checked against fixed sets before any request is
built, so malformed input never reaches the network.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Any, BinaryIO, FrozenSet, Iterable, Iterator, Optional, Union

import httpx

from core.contracts import (
    VALID_STATUSES,
    VALID_UPLET_TYPES,
    StatusUpdatePayload,
    UpletID,
    enum_value,
)
from core.logging import get_logger, log_context

logger = get_logger(__name__)


# ============================================================================
# ROUTES
# ============================================================================

ROUTE_STATUS_UPDATE = "/update_status"
ROUTE_LEARN_RESULT = "/learndone"
ROUTE_PRED_RESULT = "/preddone"

# Read size used when streaming file-like result payloads
CHUNK_SIZE = 64 * 1024

ResultData = Union[bytes, bytearray, BinaryIO, Iterable[bytes]]


# ============================================================================
# EXCEPTIONS
# ============================================================================

class OrchestratorError(Exception):
    """Base exception for orchestrator reporting failures."""

    def __init__(
        self,
        message: str,
        route: Optional[str] = None,
        url: Optional[str] = None,
        uplet_id: Optional[str] = None,
    ):
        self.route = route
        self.url = url
        self.uplet_id = uplet_id
        super().__init__(message)


class ValidationError(OrchestratorError):
    """Raised before any I/O when an argument is outside its allowed set."""

    def __init__(
        self,
        field: str,
        value: Any,
        allowed: Optional[FrozenSet[str]] = None,
        route: Optional[str] = None,
    ):
        self.field = field
        self.value = value
        self.allowed = allowed
        if allowed is None:
            message = f'[orchestrator-api] {field} "{value}" is invalid'
        else:
            message = (
                f'[orchestrator-api] {field} "{value}" is invalid. '
                f"Allowed values are {sorted(allowed)}"
            )
        super().__init__(message, route=route)


class RequestConstructionError(OrchestratorError):
    """Raised when a well-formed request cannot be built (e.g. bad host)."""

    def __init__(self, route: str, url: str, cause: BaseException):
        self.cause = cause
        super().__init__(
            f"[orchestrator-api] Error building POST request against {url} "
            f"({route}): {cause}",
            route=route,
            url=url,
        )


class TransportError(OrchestratorError):
    """Raised when the request could not be delivered (DNS, refused, timeout)."""

    def __init__(self, route: str, url: str, cause: BaseException):
        self.cause = cause
        super().__init__(
            f"[orchestrator-api] Error performing POST request against {url} "
            f"({route}): {cause}",
            route=route,
            url=url,
        )


class UnexpectedStatusError(OrchestratorError):
    """Raised when the orchestrator answers with anything but 200."""

    def __init__(self, route: str, url: str, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(
            f"[orchestrator-api] Unexpected status code ({status_code} {reason}): "
            f"POST request against {url} ({route})",
            route=route,
            url=url,
        )

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600


# ============================================================================
# HELPERS
# ============================================================================

def parse_uplet_id(uplet_id: UpletID, route: Optional[str] = None) -> uuid.UUID:
    """Coerce a UUID or its string form, raising ValidationError if malformed."""
    if isinstance(uplet_id, uuid.UUID):
        return uplet_id
    try:
        return uuid.UUID(str(uplet_id))
    except ValueError as e:
        raise ValidationError("Uplet ID", uplet_id, route=route) from e


def read_chunks(stream: BinaryIO, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """Yield successive reads from a binary stream until EOF."""
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        yield chunk


def _request_content(data: ResultData) -> Union[bytes, Iterable[bytes]]:
    """Pass bytes through; stream file-like objects without buffering."""
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if hasattr(data, "read"):
        return read_chunks(data)
    return data


# ============================================================================
# INTERFACE
# ============================================================================

class Orchestrator(ABC):
    """Operations a worker uses to report to the orchestrator."""

    @abstractmethod
    def update_uplet_status(self, uplet_type: str, status: str, uplet_id: UpletID) -> None:
        """
        Change the status field of a learnuplet/preduplet.

        Args:
            uplet_type: One of VALID_UPLET_TYPES
            status: One of VALID_STATUSES
            uplet_id: Uplet UUID

        Raises:
            OrchestratorError on failure
        """

    @abstractmethod
    def post_learn_result(self, learnuplet_id: UpletID, data: ResultData) -> None:
        """
        Forward a JSON-formatted learn result.

        Args:
            learnuplet_id: Learnuplet UUID
            data: Result document (bytes or binary stream, owned by caller)

        Raises:
            OrchestratorError on failure
        """

    @abstractmethod
    def post_pred_result(self, preduplet_id: UpletID, data: ResultData) -> None:
        """Forward a JSON-formatted prediction result."""


# ============================================================================
# HTTP CLIENT
# ============================================================================

class OrchestratorAPI(Orchestrator):
    """Sync HTTP client for the orchestrator API."""

    def __init__(
        self,
        hostname: str,
        port: int,
        timeout: Optional[Union[httpx.Timeout, float]] = None,
        transport: Optional[httpx.BaseTransport] = None,
        valid_uplet_types: Iterable[str] = VALID_UPLET_TYPES,
        valid_statuses: Iterable[str] = VALID_STATUSES,
    ):
        """
        Initialize orchestrator client.

        Args:
            hostname: Orchestrator host
            port: Orchestrator port
            timeout: Per-request timeout; None disables client-side deadlines
            transport: Optional httpx transport (proxies, test doubles)
            valid_uplet_types: Accepted uplet types
            valid_statuses: Accepted statuses
        """
        self._hostname = hostname
        self._port = int(port)
        self._timeout = timeout
        self._transport = transport
        self._valid_uplet_types = frozenset(valid_uplet_types)
        self._valid_statuses = frozenset(valid_statuses)

    @property
    def hostname(self) -> str:
        return self._hostname

    @property
    def port(self) -> int:
        return self._port

    @property
    def base_url(self) -> str:
        return f"http://{self._hostname}:{self._port}"

    def __repr__(self) -> str:
        return f"OrchestratorAPI(hostname={self._hostname!r}, port={self._port})"

    def _post(
        self,
        route: str,
        url: str,
        content: Union[bytes, Iterable[bytes]],
        headers: Optional[dict] = None,
    ) -> None:
        """
        POST content to url and require a 200 answer.

        Raises RequestConstructionError, TransportError or UnexpectedStatusError.
        """
        with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
            try:
                request = client.build_request("POST", url, content=content, headers=headers)
            except (httpx.InvalidURL, httpx.UnsupportedProtocol, ValueError) as e:
                logger.error(f"Cannot build request against {url}: {e}", extra={"url": url})
                raise RequestConstructionError(route, url, e) from e

            try:
                response = client.send(request)
            except httpx.TimeoutException as e:
                logger.error(f"Orchestrator timeout: {url}: {e}", extra={"url": url})
                raise TransportError(route, url, e) from e
            except (httpx.RequestError, OSError) as e:
                logger.error(f"Cannot reach orchestrator at {url}: {e}", extra={"url": url})
                raise TransportError(route, url, e) from e
            except Exception as e:
                # Raised by the caller's result stream while the body is sent
                logger.exception(f"Error sending request body to {url}: {e}", extra={"url": url})
                raise TransportError(route, url, e) from e

        if response.status_code != httpx.codes.OK:
            logger.warning(
                f"Orchestrator answered {response.status_code} for {url}",
                extra={"url": url, "status_code": response.status_code},
            )
            raise UnexpectedStatusError(
                route, url, response.status_code, response.reason_phrase
            )

    # ------------------------------------------------------------------
    # STATUS
    # ------------------------------------------------------------------

    def update_uplet_status(self, uplet_type: str, status: str, uplet_id: UpletID) -> None:
        """POST /update_status/{uplet_type}/{uplet_id}"""
        uplet_type = enum_value(uplet_type)
        status = enum_value(status)

        if not isinstance(uplet_type, str) or uplet_type not in self._valid_uplet_types:
            raise ValidationError(
                "Uplet type", uplet_type, self._valid_uplet_types, ROUTE_STATUS_UPDATE
            )
        if not isinstance(status, str) or status not in self._valid_statuses:
            raise ValidationError(
                "Status", status, self._valid_statuses, ROUTE_STATUS_UPDATE
            )
        uplet_id = parse_uplet_id(uplet_id, ROUTE_STATUS_UPDATE)

        url = f"{self.base_url}{ROUTE_STATUS_UPDATE}/{uplet_type}/{uplet_id}"
        payload = StatusUpdatePayload(status=status).to_bytes()

        with log_context(uplet_id=uplet_id, uplet_type=uplet_type, route=ROUTE_STATUS_UPDATE):
            logger.debug(f"POST {url} status={status}")
            self._post(
                ROUTE_STATUS_UPDATE,
                url,
                payload,
                headers={"Content-Type": "application/json"},
            )
            logger.info(f"Updated {uplet_type}-uplet {uplet_id} status to {status}")

    # ------------------------------------------------------------------
    # RESULTS
    # ------------------------------------------------------------------

    def _post_data(self, route: str, uplet_id: UpletID, data: ResultData) -> None:
        """Forward a result document unmodified to route/{uplet_id}."""
        uplet_id = parse_uplet_id(uplet_id, route)
        url = f"{self.base_url}{route}/{uplet_id}"

        with log_context(uplet_id=uplet_id, route=route):
            logger.debug(f"POST {url} (result)")
            self._post(
                route,
                url,
                _request_content(data),
                headers={"Content-Type": "application/json"},
            )
            logger.info(f"Posted result for uplet {uplet_id} to {route}")

    def post_learn_result(self, learnuplet_id: UpletID, data: ResultData) -> None:
        """POST /learndone/{learnuplet_id}"""
        self._post_data(ROUTE_LEARN_RESULT, learnuplet_id, data)

    def post_pred_result(self, preduplet_id: UpletID, data: ResultData) -> None:
        """POST /preddone/{preduplet_id}"""
        self._post_data(ROUTE_PRED_RESULT, preduplet_id, data)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ROUTE_STATUS_UPDATE",
    "ROUTE_LEARN_RESULT",
    "ROUTE_PRED_RESULT",
    "ResultData",
    "OrchestratorError",
    "ValidationError",
    "RequestConstructionError",
    "TransportError",
    "UnexpectedStatusError",
    "Orchestrator",
    "OrchestratorAPI",
    "parse_uplet_id",
    "read_chunks",
]
