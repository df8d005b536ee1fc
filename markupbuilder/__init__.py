"""
markupbuilder - build html/xml markup trees with chained calls
"""
from .config import (
    VOID_ELEMENTS,
    Convention,
    MarkupConfig,
    getdefaults,
    isvoidtag,
    resetdefaults,
    setdefaults,
    usedefaults,
)
from .escaping import escape
from .markup import ElementFactory, Markup, elements, makedocument, makeroot

__all__ = [
    "VOID_ELEMENTS",
    "Convention",
    "ElementFactory",
    "Markup",
    "MarkupConfig",
    "elements",
    "escape",
    "getdefaults",
    "isvoidtag",
    "makedocument",
    "makeroot",
    "resetdefaults",
    "setdefaults",
    "usedefaults",
]
