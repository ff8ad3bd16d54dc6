"""
Service configuration, read once from the environment at startup.
"""
from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .generators.encoder import KeyEncoder
from .generators.primitive_root import PrimitiveRootParams


class GeneratorKind(str, Enum):
    """Available key generation strategies"""
    RANDOM = "random"
    COUNTER = "redis"
    MODULAR_EXPONENTIATION = "primitive_root_redis"

    @property
    def uses_counter(self) -> bool:
        return self is not GeneratorKind.RANDOM


class Settings(BaseSettings):
    """Service settings"""

    # Application
    APP_NAME: str = "Key Generation Service"
    APP_VERSION: str = "0.1.0"

    # HTTP server
    GENERATION_KEY_SERVICE_HOST: str = "0.0.0.0"
    GENERATION_KEY_SERVICE_PORT: int = Field(8080, ge=1, le=65535)

    # Generator
    GENERATOR_TYPE: GeneratorKind = GeneratorKind.RANDOM
    NUMBER_DIGITS: int = Field(8, ge=1)

    # Counter store
    REDIS_URL: str = "redis://localhost:6379"
    REDIS_COUNTER_KEY: str = "incr:count"

    # Modular exponentiation
    GENERATOR_PRIME: int = Field(1000003, ge=2)
    GENERATOR_INCREMENT_START: int = Field(0, ge=0)
    GENERATOR_PRIME_PRIMITIVE: int = Field(2, ge=1)
    GENERATOR_VERIFY_PRIMITIVE: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    @validator("GENERATOR_TYPE", pre=True)
    def normalize_generator_type(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @validator("LOG_LEVEL")
    def check_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level == "WARN":
            level = "WARNING"
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    class Config:
        env_file = ".env"
        case_sensitive = True
        frozen = True
        extra = "ignore"

    def key_encoder(self) -> KeyEncoder:
        """Encoder for the configured digit width."""
        return KeyEncoder(self.NUMBER_DIGITS)

    def primitive_root_params(self) -> PrimitiveRootParams:
        return PrimitiveRootParams(
            prime=self.GENERATOR_PRIME,
            primitive_root=self.GENERATOR_PRIME_PRIMITIVE,
            start=self.GENERATOR_INCREMENT_START,
        )


@lru_cache()
def get_settings() -> Settings:
    """Process-wide settings instance."""
    return Settings()
