"""Segpath exception hierarchy.

``Pattern.match`` and ``Pattern.build`` report failure through a flag and
never raise. These types back the raising conveniences and the syntax
configuration.
"""


class SegpathError(Exception):
    """Base for all segpath-specific errors."""


class ConfigurationError(SegpathError):
    """Raised when a ``Syntax`` is unusable, e.g. an empty separator."""


class NoMatch(SegpathError):  # noqa: N818 — reads naturally at the raise site
    """A path did not match a compiled pattern."""

    def __init__(self, template: str, path: str) -> None:
        # args carry the fields so the error survives pickling
        super().__init__(template, path)
        self.template = template
        self.path = path

    def __str__(self) -> str:
        return f"{self.path!r} does not match {self.template!r}"


class MissingParameter(SegpathError, KeyError):  # noqa: N818
    """A build was missing a value for one of the pattern's parameters.

    Also a ``KeyError``, so code treating the parameters as a plain
    mapping catches it without importing segpath.
    """

    def __init__(self, template: str, name: str) -> None:
        super().__init__(template, name)
        self.template = template
        self.name = name

    def __str__(self) -> str:
        return f"missing parameter {self.name!r} for {self.template!r}"
