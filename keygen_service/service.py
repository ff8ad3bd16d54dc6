"""
Key generator service.
Adapts the generator to the API and translates generator failures into
HTTP-facing exceptions. This is the only place where that translation happens.
"""
from .exceptions import AppException, InternalServerError, NotFoundError, ServiceUnavailableError
from .generators import (
    GeneratorConnectionError,
    GeneratorError,
    GeneratorNotFoundError,
    GeneratorUnknownError,
    KeyGenerator,
)
from .logger import logger
from .schemas.keys import GenerateKeyResponse, PingResponse


def to_app_exception(error: GeneratorError) -> AppException:
    """Map a generator failure to its HTTP-facing exception."""
    if isinstance(error, GeneratorConnectionError):
        return ServiceUnavailableError("Connection error")
    if isinstance(error, GeneratorNotFoundError):
        return NotFoundError("Generator not found")
    if isinstance(error, GeneratorUnknownError):
        return InternalServerError(f"Generator error: {error.detail}", details={"detail": error.detail})
    return InternalServerError(f"Generator error: {error.message}")


class KeyGeneratorService:
    """Handles ping and key generation requests."""

    def __init__(self, generator: KeyGenerator):
        self.generator = generator

    async def ping(self) -> PingResponse:
        return PingResponse(ack="pong")

    async def generate_key(self) -> GenerateKeyResponse:
        """
        Generate one key.

        Raises:
            AppException: ServiceUnavailableError, NotFoundError or
                InternalServerError, depending on the generator failure.
        """
        try:
            key = await self.generator.generate_key()
        except GeneratorError as e:
            logger.generator_error("Key generation failed", strategy=self.generator.name, error=e.message)
            raise to_app_exception(e) from e
        return GenerateKeyResponse(key=key)
