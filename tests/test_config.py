import asyncio

import pytest
from pydantic import ValidationError

from keygen_service.config import GeneratorKind, Settings
from keygen_service.generators import GeneratorConfigurationError
from keygen_service.generators.factory import create_generator

from .conftest import StubRedis


def test_defaults():
    settings = Settings()
    assert settings.GENERATION_KEY_SERVICE_PORT == 8080
    assert settings.GENERATOR_TYPE is GeneratorKind.RANDOM
    assert settings.REDIS_URL == "redis://localhost:6379"
    assert settings.GENERATOR_PRIME == 1000003
    assert settings.GENERATOR_INCREMENT_START == 0
    assert settings.GENERATOR_PRIME_PRIMITIVE == 2
    assert settings.NUMBER_DIGITS == 8
    assert settings.GENERATOR_VERIFY_PRIMITIVE is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("GENERATOR_TYPE", "Primitive_Root_Redis")
    monkeypatch.setenv("NUMBER_DIGITS", "6")
    monkeypatch.setenv("GENERATOR_PRIME", "7")
    monkeypatch.setenv("GENERATION_KEY_SERVICE_PORT", "9090")
    settings = Settings()
    assert settings.GENERATOR_TYPE is GeneratorKind.MODULAR_EXPONENTIATION
    assert settings.NUMBER_DIGITS == 6
    assert settings.GENERATOR_PRIME == 7
    assert settings.GENERATION_KEY_SERVICE_PORT == 9090


@pytest.mark.parametrize("overrides", [
    {"GENERATOR_TYPE": "sequential"},
    {"NUMBER_DIGITS": 0},
    {"GENERATOR_PRIME": 1},
    {"GENERATION_KEY_SERVICE_PORT": 70000},
    {"LOG_LEVEL": "LOUD"},
])
def test_invalid_values_are_rejected(overrides):
    with pytest.raises(ValidationError):
        Settings(**overrides)


def test_warn_level_alias():
    assert Settings(LOG_LEVEL="warn").LOG_LEVEL == "WARNING"


def test_settings_are_immutable():
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.NUMBER_DIGITS = 4


def test_key_encoder_uses_digit_width():
    encoder = Settings(NUMBER_DIGITS=5).key_encoder()
    assert encoder.digits == 5
    assert encoder.max_number == 62 ** 5 - 1


# ========== Generator factory ==========

def test_create_random_generator():
    generator = create_generator(Settings(NUMBER_DIGITS=6))
    assert generator.name == "random"
    assert len(asyncio.run(generator.generate_key())) == 6


def test_create_counter_generator():
    redis = StubRedis()
    generator = create_generator(Settings(GENERATOR_TYPE="redis", REDIS_COUNTER_KEY="c"), redis)
    assert generator.name == "redis"
    assert asyncio.run(generator.generate_key()) == "00000001"
    assert redis.keys == ["c"]


def test_create_primitive_root_generator():
    settings = Settings(GENERATOR_TYPE="primitive_root_redis", GENERATOR_PRIME=7, GENERATOR_PRIME_PRIMITIVE=3)
    generator = create_generator(settings, StubRedis())
    assert generator.name == "primitive_root_redis"
    assert asyncio.run(generator.generate_key()) == "00000003"


@pytest.mark.parametrize("kind", ["redis", "primitive_root_redis"])
def test_counter_kinds_require_redis(kind):
    with pytest.raises(GeneratorConfigurationError):
        create_generator(Settings(GENERATOR_TYPE=kind))


def test_oversized_prime_fails_construction():
    settings = Settings(GENERATOR_TYPE="primitive_root_redis", NUMBER_DIGITS=1, GENERATOR_PRIME=67)
    with pytest.raises(GeneratorConfigurationError):
        create_generator(settings, StubRedis())


def test_verification_flag_reaches_strategy():
    settings = Settings(
        GENERATOR_TYPE="primitive_root_redis",
        GENERATOR_PRIME=7,
        GENERATOR_PRIME_PRIMITIVE=2,
        GENERATOR_VERIFY_PRIMITIVE=True,
    )
    with pytest.raises(GeneratorConfigurationError):
        create_generator(settings, StubRedis())
