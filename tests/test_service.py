import asyncio

import pytest

from keygen_service.exceptions import InternalServerError, NotFoundError, ServiceUnavailableError
from keygen_service.generators import (
    GeneratorConnectionError,
    GeneratorNotFoundError,
    GeneratorUnknownError,
)
from keygen_service.service import KeyGeneratorService


class FakeGenerator:
    name = "fake"

    def __init__(self, key="abcdef12", error=None):
        self.key = key
        self.error = error

    async def generate_key(self):
        if self.error is not None:
            raise self.error
        return self.key


def test_ping():
    service = KeyGeneratorService(FakeGenerator())
    assert asyncio.run(service.ping()).ack == "pong"


def test_ping_ignores_generator_state():
    service = KeyGeneratorService(FakeGenerator(error=GeneratorConnectionError()))
    assert asyncio.run(service.ping()).ack == "pong"


def test_generate_key_ok():
    service = KeyGeneratorService(FakeGenerator(key="abcdef12"))
    assert asyncio.run(service.generate_key()).key == "abcdef12"


@pytest.mark.parametrize("error,exception,status_code,message", [
    (GeneratorConnectionError(), ServiceUnavailableError, 503, "Connection error"),
    (GeneratorNotFoundError(), NotFoundError, 404, "Generator not found"),
    (GeneratorUnknownError("Some error"), InternalServerError, 500, "Generator error: Some error"),
])
def test_generate_key_error_mapping(error, exception, status_code, message):
    service = KeyGeneratorService(FakeGenerator(error=error))
    with pytest.raises(exception) as exc_info:
        asyncio.run(service.generate_key())
    assert exc_info.value.status_code == status_code
    assert exc_info.value.message == message
