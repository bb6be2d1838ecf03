"""
Field descriptions for config schema classes.

A schema is a dataclass whose fields carry an Env tag, either inside
Annotated[...] or in dataclasses.field(metadata=...). The descriptors are
derived once per class and cached; the binder only ever walks this list.
"""

import enum
from dataclasses import MISSING, dataclass, fields, is_dataclass
from functools import lru_cache
from types import UnionType
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from envconfig.tags import Default, Env


class FieldKind(enum.Enum):
    """Supported primitive kinds a raw string can be converted to."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    FLOAT = "float"


_KINDS_BY_TYPE = {
    str: FieldKind.STRING,
    int: FieldKind.INTEGER,
    bool: FieldKind.BOOLEAN,
    float: FieldKind.FLOAT,
}


@dataclass(frozen=True)
class FieldDescriptor:
    """Static binding of one dataclass field to an environment variable.

    kind is None when the declared type is not supported; binding such a
    field fails as soon as a value is present for it.
    """

    name: str
    key: str
    kind: FieldKind | None
    declared_type: Any
    default: Any = MISSING
    default_factory: Any = MISSING

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING or self.default_factory is not MISSING


def _field_env_tag(metadata: list[Any]) -> Env | None:
    for m in metadata:
        if isinstance(m, Env):
            return m
    return None


def _field_default_tag(metadata: list[Any]) -> Default | None:
    for m in metadata:
        if isinstance(m, Default):
            return m
    return None


def _unwrap_optional(hint: Any) -> Any:
    """Get T for Optional[T] / T | None; anything else is returned unchanged."""
    if get_origin(hint) not in (Union, UnionType):
        return hint
    args = [a for a in get_args(hint) if a is not type(None)]
    if len(args) == 1 and len(args) < len(get_args(hint)):
        return args[0]
    return hint


def _field_kind(hint: Any) -> FieldKind | None:
    inner = _unwrap_optional(hint)
    if not isinstance(inner, type):
        return None
    return _KINDS_BY_TYPE.get(inner)


def describe(schema_class: type) -> tuple[FieldDescriptor, ...]:
    """
    Build the ordered field descriptors for a dataclass schema.

    - Only fields with an Env tag are described, in declaration order.
    - Raises TypeError if schema_class is not a dataclass type.
    """
    if not isinstance(schema_class, type) or not is_dataclass(schema_class):
        raise TypeError(f"Schema must be a dataclass, got: {schema_class!r}")
    return _describe(schema_class)


@lru_cache(maxsize=None)
def _describe(schema_class: type) -> tuple[FieldDescriptor, ...]:
    hints = get_type_hints(schema_class, include_extras=True)
    descriptors: list[FieldDescriptor] = []

    for f in fields(schema_class):
        hint = hints.get(f.name, f.type)
        metadata = list(f.metadata.values()) if f.metadata else []
        # Support Annotated[X, Env(...), Default(...)]
        if get_origin(hint) is Annotated:
            args = get_args(hint)
            hint = args[0]
            metadata.extend(args[1:])

        env = _field_env_tag(metadata)
        if env is None:
            continue

        default = f.default
        default_factory = f.default_factory
        default_tag = _field_default_tag(metadata)
        if default is MISSING and default_factory is MISSING and default_tag is not None:
            default = default_tag.value

        descriptors.append(
            FieldDescriptor(
                name=f.name,
                key=env.name,
                kind=_field_kind(hint),
                declared_type=hint,
                default=default,
                default_factory=default_factory,
            )
        )

    return tuple(descriptors)
