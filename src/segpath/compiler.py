"""Template compilation.

Every string is a valid template: anything that is not a whole-segment
parameter or a final wildcard is matched literally.
"""

import logging

from segpath.config import DEFAULT_SYNTAX, Syntax
from segpath.pattern import Pattern
from segpath.segment import Param, Segment, Static

logger = logging.getLogger("segpath.compiler")


def parse_template(
    template: str, syntax: Syntax = DEFAULT_SYNTAX
) -> tuple[tuple[Segment, ...], bool]:
    """Split a template into segments and a trailing-wildcard flag.

    Examples::

        "foo"          -> (Static("foo"),), False
        "/:foo"        -> (Static(""), Param("foo")), False
        "/files/*"     -> (Static(""), Static("files")), True
        "*"            -> (), True
        "a:b"          -> (Static("a:b"),), False
    """
    parts = template.split(syntax.separator)

    trailing = parts[-1] == syntax.wildcard
    if trailing:
        parts.pop()

    segments: list[Segment] = []
    for part in parts:
        if part.startswith(syntax.param_prefix):
            segments.append(Param(part[len(syntax.param_prefix) :]))
        else:
            segments.append(Static(part))
    return tuple(segments), trailing


def compile(template: str, syntax: Syntax = DEFAULT_SYNTAX) -> Pattern:  # noqa: A001
    """Compile *template* into an immutable ``Pattern``.

    Compile once and reuse the result for every match and build::

        pattern = compile("/shelves/:shelf/books/:book")
        match, ok = pattern.match("/shelves/1/books/2")
    """
    segments, trailing = parse_template(template, syntax)
    logger.debug(
        "Compiled %r: %d segment(s), trailing=%s", template, len(segments), trailing
    )
    return Pattern(template=template, segments=segments, trailing=trailing, syntax=syntax)
