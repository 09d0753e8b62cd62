"""Simulated bridge transfer routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from token_bridge.api.dependencies import get_simulated_backend
from token_bridge.domain.transfer_models import BridgeTransferMessage, TransferResponseMessage
from token_bridge.infrastructure.bridge_backend import SimulatedBridgeBackend

router = APIRouter(prefix="/api", tags=["bridge"])


@router.post(
    "/bridge",
    response_model=TransferResponseMessage,
    responses={
        400: {"model": TransferResponseMessage, "description": "Missing required fields"},
        500: {"model": TransferResponseMessage, "description": "Simulated bridge failure"},
    },
)
async def submit_bridge_transfer(
    message: BridgeTransferMessage,
    backend: SimulatedBridgeBackend = Depends(get_simulated_backend),
) -> JSONResponse:
    """Accept a transfer after a simulated latency, or fail at random."""

    result = await backend.handle(message)
    return JSONResponse(
        status_code=result.status_code,
        content=result.body.model_dump(by_alias=True, exclude_none=True),
    )


__all__ = ["router"]
