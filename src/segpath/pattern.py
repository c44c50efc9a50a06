"""Compiled pattern with positional segment matching and building.

A Pattern is created once by ``segpath.compile`` and is immutable
afterwards, so one instance can serve any number of concurrent callers.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from segpath.config import DEFAULT_SYNTAX, Syntax
from segpath.errors import MissingParameter, NoMatch
from segpath.segment import Match, Param, Segment, Static

logger = logging.getLogger("segpath.pattern")


@dataclass(frozen=True, slots=True)
class Pattern:
    """A compiled template.

    Usage::

        pattern = compile("/users/:user/files/*")
        match, ok = pattern.match("/users/ada/files/notes/today.txt")
        # Match(params={"user": "ada"}, trailing="notes/today.txt"), True
        path, ok = pattern.build(match)
        # "/users/ada/files/notes/today.txt", True

    Each segment consumes exactly one path segment. A trailing wildcard
    consumes the separator after the fixed segments plus everything that
    follows it, so there is never any backtracking.
    """

    template: str
    segments: tuple[Segment, ...]
    trailing: bool = False
    syntax: Syntax = DEFAULT_SYNTAX

    def __str__(self) -> str:
        return self.template

    @property
    def param_names(self) -> tuple[str, ...]:
        """Parameter names in template order, each listed once."""
        return tuple(dict.fromkeys(seg.name for seg in self.segments if seg.is_param))

    def match(self, path: str) -> tuple[Match, bool]:
        """Match *path* against this pattern.

        Returns the populated ``Match`` and ``True`` on success, or a
        zero-value ``Match()`` and ``False`` on failure. Never raises.
        """
        parts = path.split(self.syntax.separator)
        count = len(self.segments)

        if self.trailing:
            # The wildcard needs the separator after the fixed segments
            if len(parts) <= count:
                return Match(), False
        elif len(parts) != count:
            return Match(), False

        params: dict[str, str] = {}
        for seg, part in zip(self.segments, parts):
            match seg:
                case Static(text):
                    if part != text:
                        return Match(), False
                case Param(name):
                    # Reused names keep the last binding
                    params[name] = part

        if not self.trailing:
            return Match(params=params), True

        return Match(params=params, trailing=self.syntax.separator.join(parts[count:])), True

    def build(self, match: Match) -> tuple[str, bool]:
        """Rebuild a path from *match*; the inverse of ``match()``.

        Returns ``("", False)`` when *match* lacks a value for one of the
        pattern's parameters. Never raises.
        """
        try:
            return self._build(match.params, match.trailing), True
        except MissingParameter:
            return "", False

    def resolve(self, path: str) -> Match:
        """Like ``match()``, but raise ``NoMatch`` instead of returning a flag."""
        result, ok = self.match(path)
        if not ok:
            logger.debug("No match: %r against %r", path, self.template)
            raise NoMatch(template=self.template, path=path)
        return result

    def expand(self, params: Mapping[str, str] | None = None, trailing: str = "") -> str:
        """Build a path from keyword-style values.

        Raises ``MissingParameter`` naming the first parameter without a value::

            compile("/shelves/:shelf/books/:book").expand({"shelf": "1", "book": "2"})
            # "/shelves/1/books/2"
        """
        try:
            return self._build(params or {}, trailing)
        except MissingParameter as exc:
            logger.debug("Cannot expand %r: missing %r", self.template, exc.name)
            raise

    def _build(self, params: Mapping[str, str], trailing: str) -> str:
        parts: list[str] = []
        for seg in self.segments:
            match seg:
                case Static(text):
                    parts.append(text)
                case Param(name):
                    if name not in params:
                        raise MissingParameter(template=self.template, name=name)
                    parts.append(params[name])

        path = self.syntax.separator.join(parts)
        if not self.trailing:
            return path

        # A bare wildcard captured the whole path, separator included
        if self.segments:
            path += self.syntax.separator
        return path + trailing
