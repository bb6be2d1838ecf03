"""envconfig: bind environment variables (optionally seeded from a .env file) to typed dataclasses."""

from envconfig.binder import environ_lookup, populate
from envconfig.errors import ConfigError, ConversionError, DestinationError, UnsupportedTypeError
from envconfig.fields import FieldDescriptor, FieldKind, describe
from envconfig.loader import DEFAULT_DOTENV_PATH, initialize_config, load_config
from envconfig.sources import SeedResult, seed
from envconfig.tags import Default, Env

__all__ = [
    "initialize_config",
    "load_config",
    "populate",
    "seed",
    "SeedResult",
    "environ_lookup",
    "describe",
    "FieldDescriptor",
    "FieldKind",
    "DEFAULT_DOTENV_PATH",
    "ConfigError",
    "ConversionError",
    "DestinationError",
    "UnsupportedTypeError",
    "Env",
    "Default",
]
