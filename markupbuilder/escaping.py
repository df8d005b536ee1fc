"""
escaping - convert text to entity form for a given convention

escape() replaces markup characters and quotes with entities, converts
characters with a named (html 4) entity when the target is html or xhtml,
and replaces characters that are not allowed in the target document type
with the replacement character entity.
"""
from __future__ import annotations

from html.entities import codepoint2name
from typing import Dict

from .config import Convention

REPLACEMENT = "&#xFFFD;"

# always escaped, whatever the convention
_MARKUP = {
    ord("&"): "&amp;",
    ord("<"): "&lt;",
    ord(">"): "&gt;",
    ord('"'): "&quot;",
}


def _xmlallowed(cp: int) -> bool:
    # Char ::= #x9 | #xA | #xD | [#x20-#xD7FF] | [#xE000-#xFFFD] | [#x10000-#x10FFFF]
    return (
        cp in (0x9, 0xA, 0xD)
        or 0x20 <= cp <= 0xD7FF
        or 0xE000 <= cp <= 0xFFFD
        or 0x10000 <= cp <= 0x10FFFF
    )


def _htmlallowed(cp: int) -> bool:
    # html 4.01 document characters, noncharacters excluded
    if cp < 0xA0:
        return cp in (0x9, 0xA, 0xD) or 0x20 <= cp <= 0x7E
    if cp <= 0xD7FF:
        return True
    return (
        0xE000 <= cp <= 0x10FFFF
        and (cp & 0xFFFF) < 0xFFFE
        and not 0xFDD0 <= cp <= 0xFDEF
    )


def _table(convention: Convention) -> Dict[int, str]:
    table = dict(_MARKUP)
    if convention is not Convention.XML1:
        # named entities from the html 4 set (xhtml 1.0 shares it)
        for cp, name in codepoint2name.items():
            table.setdefault(cp, f"&{name};")
    # &apos; is not an html 4 entity
    table[ord("'")] = "&#039;" if convention is Convention.HTML else "&apos;"
    return table


_TABLES = {c: _table(c) for c in Convention}


def escape(value: str, convention: Convention = Convention.XML1) -> str:
    """
    escape - return value with reserved, quote and disallowed characters
        replaced by entities

    value: text to escape
    convention: target dialect, selects the entity set and the characters
        considered disallowed
    """
    table = _TABLES[convention]
    allowed = _htmlallowed if convention is Convention.HTML else _xmlallowed
    out = []
    for ch in value:
        cp = ord(ch)
        entity = table.get(cp)
        if entity is not None:
            out.append(entity)
        elif allowed(cp):
            out.append(ch)
        else:
            out.append(REPLACEMENT)
    return "".join(out)
