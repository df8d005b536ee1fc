"""
config - rendering configuration for markupbuilder

A MarkupConfig can be attached to a root (makeroot(..., config=...)) or
passed to render(). Trees without a config use the process wide defaults,
read at the moment text is attached or the tree is rendered.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Callable, Iterator

log = logging.getLogger(__name__)

# in html5 these elements can not have a closing tags (or empty tag)
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


class Convention(Enum):
    """Escaping convention (target document dialect)."""

    HTML = "html"
    XML1 = "xml1"
    XHTML = "xhtml"

    @property
    def isxml(self) -> bool:
        """
        isxml - True for the xml family. Boolean attributes are rendered as
            key="key" and false attributes are kept (empty)
        """
        return self in (Convention.XML1, Convention.XHTML)


def isvoidtag(tagName: str) -> bool:
    """
    isvoidtag - default void element lookup (html5 void elements)
    """
    return tagName.lower() in VOID_ELEMENTS


@dataclass(frozen=True)
class MarkupConfig:
    """
    escape: escape text and attribute values when True
    convention: entity rule set used for escaping and attribute rendering
    voidtag: predicate deciding, at creation, if a tag is a void element
    """

    escape: bool = False
    convention: Convention = Convention.XML1
    voidtag: Callable[[str], bool] = isvoidtag

    def __post_init__(self) -> None:
        if not isinstance(self.convention, Convention):
            raise ValueError(f"convention must be a Convention: {self.convention!r}")
        if not callable(self.voidtag):
            raise ValueError("voidtag must be callable")


_defaults = MarkupConfig()


def getdefaults() -> MarkupConfig:
    """
    getdefaults - return the process wide configuration
    """
    return _defaults


def setdefaults(**changes) -> MarkupConfig:
    """
    setdefaults - change fields of the process wide configuration

    changes: MarkupConfig fields to replace (escape, convention, voidtag)

    Returns the previous defaults so they can be restored
    """
    global _defaults
    known = {f.name for f in fields(MarkupConfig)}
    unknown = set(changes) - known
    if unknown:
        raise ValueError(f"Unknown configuration field(s): {', '.join(sorted(unknown))}")
    previous = _defaults
    _defaults = replace(previous, **changes)
    log.debug("markup defaults changed: %s", changes)
    return previous


def resetdefaults() -> None:
    """
    resetdefaults - restore the built in defaults
    """
    global _defaults
    _defaults = MarkupConfig()


@contextmanager
def usedefaults(**changes) -> Iterator[MarkupConfig]:
    """
    usedefaults - temporarily change the process wide configuration

        with usedefaults(escape=True, convention=Convention.HTML):
            ...
    """
    global _defaults
    previous = setdefaults(**changes)
    try:
        yield _defaults
    finally:
        _defaults = previous
