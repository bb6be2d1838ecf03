"""
Exceptions raised while binding environment variables to a config structure.
"""


class ConfigError(Exception):
    """Base class for all fatal configuration population failures."""


class DestinationError(ConfigError, TypeError):
    """Raised when the destination is not a mutable dataclass instance."""


class ConversionError(ConfigError, ValueError):
    """Raised when a present value cannot be coerced to its field's declared type."""

    def __init__(self, key: str, field: str, kind: str, raw: str, reason: str | None = None):
        self.key = key
        self.field = field
        self.kind = kind
        self.raw = raw
        self.reason = reason
        message = f"invalid {kind} value for {key}: {raw!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnsupportedTypeError(ConfigError, TypeError):
    """Raised when a bound field declares a type outside str, int, bool and float."""

    def __init__(self, field: str, declared_type: object):
        self.field = field
        self.declared_type = declared_type
        super().__init__(f"unsupported field type for {field}: {_type_name(declared_type)}")


def _type_name(typ: object) -> str:
    if isinstance(typ, type):
        return typ.__name__
    return str(typ).replace("typing.", "")
