"""
Entry points: seed from an optional .env file, then bind the environment
onto a config dataclass.
"""

import logging
import os
from dataclasses import MISSING, fields
from typing import Any, MutableMapping, Type, TypeVar

from envconfig.binder import environ_lookup, populate
from envconfig.errors import DestinationError
from envconfig.fields import describe
from envconfig.sources import seed

logger = logging.getLogger(__name__)

DEFAULT_DOTENV_PATH = ".env"

T = TypeVar("T")


def initialize_config(
    destination: T,
    dotenv_path: str | os.PathLike | None = DEFAULT_DOTENV_PATH,
    environ: MutableMapping[str, str] | None = None,
) -> T:
    """
    Seed from dotenv_path (if given) and populate destination in place.

    Variables already present in environ take precedence over the file.
    A missing file only produces a warning; population still runs.
    """
    if environ is None:
        environ = os.environ

    if dotenv_path is not None:
        result = seed(dotenv_path, environ)
        if result.found:
            logger.info(
                "Loaded %d variable(s) from %s (%d already set)",
                len(result.applied),
                result.path,
                len(result.skipped),
            )

    return populate(destination, environ_lookup(environ))


def _default_kwargs(schema_class: type) -> dict[str, Any]:
    """Constructor arguments for fields whose default only comes from a Default tag."""
    described = {d.name: d for d in describe(schema_class)}
    kwargs: dict[str, Any] = {}
    missing: list[str] = []

    for f in fields(schema_class):
        if not f.init or f.default is not MISSING or f.default_factory is not MISSING:
            continue
        descriptor = described.get(f.name)
        if descriptor is not None and descriptor.has_default:
            kwargs[f.name] = descriptor.default
        else:
            missing.append(f.name)

    if missing:
        raise DestinationError(
            f"{schema_class.__name__} needs defaults for: {', '.join(missing)}"
        )
    return kwargs


def load_config(
    schema_class: Type[T],
    dotenv_path: str | os.PathLike | None = None,
    environ: MutableMapping[str, str] | None = None,
) -> T:
    """
    Build schema_class from its defaults and populate it from the environment.

    - schema_class: a mutable dataclass; every field needs a dataclass default or a Default tag
    - dotenv_path: optional .env file to seed from first
    - environ: mapping to seed into and read from (default: os.environ). Pass a dict for tests.
    """
    try:
        describe(schema_class)
    except TypeError as e:
        raise DestinationError(str(e)) from e

    instance = schema_class(**_default_kwargs(schema_class))
    return initialize_config(instance, dotenv_path=dotenv_path, environ=environ)
