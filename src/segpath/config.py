"""Template syntax configuration.

Syntax is a frozen dataclass — immutable after creation, shared freely
between patterns, no string-key dict lookups.
"""

from dataclasses import dataclass

from segpath.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Syntax:
    """Markers recognised by the compiler. Immutable after creation.

    The defaults describe URL paths. Override what you need::

        dotted = Syntax(separator=".")
        compile("events.:kind.*", dotted)
    """

    # Splits templates and paths into segments
    separator: str = "/"

    # A segment starting with this binds a parameter
    param_prefix: str = ":"

    # A final segment equal to this captures the remainder
    wildcard: str = "*"

    def __post_init__(self) -> None:
        for field_name in ("separator", "param_prefix", "wildcard"):
            if not getattr(self, field_name):
                msg = f"Syntax.{field_name} must not be empty."
                raise ConfigurationError(msg)

        # A marker containing the separator could never appear whole in a segment
        for field_name in ("param_prefix", "wildcard"):
            if self.separator in getattr(self, field_name):
                msg = (
                    f"Syntax.{field_name} {getattr(self, field_name)!r} "
                    f"contains the separator {self.separator!r}."
                )
                raise ConfigurationError(msg)


DEFAULT_SYNTAX = Syntax()
