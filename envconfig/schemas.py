"""
Example config schema for a MongoDB-backed service.
Used by the envconfig command and as a template for application schemas.
"""

from dataclasses import dataclass
from typing import Annotated

from envconfig.tags import Default, Env


@dataclass
class MongoConfig:
    """Connection settings for MongoDB plus the service debug flag."""

    host: Annotated[str, Env("MONGO_HOST"), Default("")]
    port: Annotated[int, Env("MONGO_PORT"), Default(0)]
    user: Annotated[str, Env("MONGO_USER"), Default("")]
    password: Annotated[str, Env("MONGO_PASSWORD"), Default("")]
    debug_mode: Annotated[bool, Env("DEBUG_MODE"), Default(False)]
