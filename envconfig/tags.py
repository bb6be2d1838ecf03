"""
Tag types for config schema definitions.
Used inside Annotated[type, ...] (or dataclasses.field metadata) to bind a
field to an environment variable and give it a load-time default.
"""


class Env:
    """Bind the field to an environment variable. Untagged fields are never populated."""

    def __init__(self, name: str):
        if not name:
            raise ValueError("Env tag requires a non-empty variable name")
        self.name = name

    def __repr__(self) -> str:
        return f"Env({self.name!r})"


class Default:
    """Explicit default value used by load_config when the dataclass field has none."""

    def __init__(self, value: object):
        self.value = value

    def __repr__(self) -> str:
        return f"Default({self.value!r})"
