"""
API routes for the key generation service.
"""
from fastapi import APIRouter, Depends, Request

from .schemas.keys import ErrorResponse, GenerateKeyResponse, PingResponse
from .service import KeyGeneratorService

router = APIRouter(prefix="/api/v1", tags=["Keys"])


def get_key_service(request: Request) -> KeyGeneratorService:
    """Service bound to the generator built at startup."""
    return KeyGeneratorService(request.app.state.generator)


@router.get("/ping", response_model=PingResponse)
async def ping(service: KeyGeneratorService = Depends(get_key_service)):
    """Liveness probe."""
    return await service.ping()


@router.post(
    "/keys",
    response_model=GenerateKeyResponse,
    responses={
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def generate_key(service: KeyGeneratorService = Depends(get_key_service)):
    """Generate a new key. Not idempotent: counter-based generators advance the shared counter on every call."""
    return await service.generate_key()

