"""Segpath — compile path templates, match paths, build them back.

A template is split on ``/``. Segments starting with ``:`` bind a
parameter, a final ``*`` captures the rest of the path, and everything
else matches literally.

Basic usage::

    import segpath

    pattern = segpath.compile("/shelves/:shelf/books/:book")

    match, ok = pattern.match("/shelves/123/books/456")
    # match.params == {"shelf": "123", "book": "456"}

    path, ok = pattern.build(match)
    # path == "/shelves/123/books/456"
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_SYNTAX",
    "ConfigurationError",
    "Match",
    "MissingParameter",
    "NoMatch",
    "Param",
    "Pattern",
    "SegpathError",
    "Segment",
    "Static",
    "Syntax",
    "compile",
]


# Public name -> defining module, resolved on first attribute access
_LAZY_IMPORTS: dict[str, str] = {
    "DEFAULT_SYNTAX": "segpath.config",
    "Syntax": "segpath.config",
    "compile": "segpath.compiler",
    "ConfigurationError": "segpath.errors",
    "MissingParameter": "segpath.errors",
    "NoMatch": "segpath.errors",
    "SegpathError": "segpath.errors",
    "Pattern": "segpath.pattern",
    "Match": "segpath.segment",
    "Param": "segpath.segment",
    "Segment": "segpath.segment",
    "Static": "segpath.segment",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import segpath`` cheap while providing a flat top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_name), name)
