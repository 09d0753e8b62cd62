"""HTTP client for the bridge transfer backend."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from token_bridge.domain.errors import (
    GENERIC_TRANSFER_FAILURE,
    TransferBackendError,
    TransferRejectedError,
    TransferTransportError,
)
from token_bridge.domain.ports import TransferBackend
from token_bridge.domain.transfer_models import TransferRequest, TransferResponseMessage


class HttpTransferBackend(TransferBackend):
    """Submit transfers to a backend speaking the `/api/bridge` contract."""

    def __init__(
        self,
        endpoint_url: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint_url = self._normalize_endpoint(endpoint_url)
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    async def submit_transfer(self, request: TransferRequest) -> str:
        """POST the request and return the assigned transaction id."""

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as http_client:
                response = await http_client.post(self._endpoint_url, json=request.to_wire())
        except httpx.HTTPError as exc:
            raise TransferTransportError(self._transport_detail(exc)) from exc

        payload = self._json_payload(response)
        message = self._response_message(payload)
        if not response.is_success or message is None or not message.success:
            raise TransferRejectedError(self._error_detail(payload))
        if not message.transaction_id:
            raise TransferRejectedError(GENERIC_TRANSFER_FAILURE)
        return message.transaction_id

    def _json_payload(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    def _response_message(self, payload: Any) -> TransferResponseMessage | None:
        if not isinstance(payload, dict):
            return None
        try:
            return TransferResponseMessage.model_validate(payload)
        except ValidationError:
            return None

    def _error_detail(self, payload: Any) -> str:
        if isinstance(payload, dict):
            for key in ("error", "detail"):
                detail = payload.get(key)
                if isinstance(detail, str) and detail.strip():
                    return detail.strip()
        return GENERIC_TRANSFER_FAILURE

    def _transport_detail(self, exc: httpx.HTTPError) -> str:
        detail = str(exc).strip()
        if not detail:
            return GENERIC_TRANSFER_FAILURE
        return f"Network error: {detail}"

    def _normalize_endpoint(self, endpoint_url: str) -> str:
        normalized = endpoint_url.strip().rstrip("/")
        if not normalized:
            raise TransferBackendError("Bridge backend endpoint cannot be empty.")
        return normalized


__all__ = ["HttpTransferBackend"]
