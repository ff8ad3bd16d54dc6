# Key Generation Service

from .config import GeneratorKind, Settings, get_settings
from .generators import KeyEncoder, KeyGenerator
from .generators.factory import create_generator

__all__ = [
    "GeneratorKind",
    "KeyEncoder",
    "KeyGenerator",
    "Settings",
    "create_generator",
    "get_settings",
]

__version__ = "0.1.0"
