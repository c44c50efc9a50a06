"""Segment and Match frozen dataclasses."""

from dataclasses import dataclass, field
from typing import ClassVar, TypeAlias


@dataclass(frozen=True, slots=True)
class Static:
    """A literal segment, matched character for character.

    ``text`` may be empty: ``"/users"`` starts with ``Static("")``.
    """

    text: str
    is_param: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class Param:
    """A segment that binds one path segment under ``name``.

    ``name`` may be empty: the template segment ``":"`` yields ``Param("")``.
    """

    name: str
    is_param: ClassVar[bool] = True


Segment: TypeAlias = Static | Param


@dataclass(slots=True)
class Match:
    """Result of matching a path against a pattern.

    A failed match returns the zero value ``Match()`` alongside ``False``.
    Each call produces a new instance owned by the caller. Not hashable.
    """

    params: dict[str, str] = field(default_factory=dict)
    trailing: str = ""

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value bound to *name*, or *default*."""
        return self.params.get(name, default)

    def __contains__(self, name: object) -> bool:
        """Whether a parameter named *name* was bound."""
        return name in self.params
