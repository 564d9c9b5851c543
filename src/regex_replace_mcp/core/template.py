"""Dollar-style replacement templates.

Callers write replacements with ``$1``/``$0`` back-references, the way most
editors and regex tools do. Python's ``re`` only understands ``\\1`` and
``\\g<1>``, so templates are handled here in two steps:

1. ``escape_replacement`` normalizes the caller's text. Digit references become
   ``${N}`` and every other ``$`` is doubled, so ``$request`` in PHP or shell
   code survives as a literal instead of being read as a named group.
2. ``compile_template`` parses the escaped template once into literal and group
   parts and returns a callable for ``re.Pattern.sub``. Backslashes are never
   interpreted.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum, auto
from typing import TypeAlias

TemplatePart: TypeAlias = str | int | tuple[str]  # literal, group index, (group name,)
Replacer: TypeAlias = Callable[[re.Match[str]], str]


class _ScanState(Enum):
    NORMAL = auto()
    AFTER_DOLLAR = auto()
    IN_DIGIT_RUN = auto()


def escape_replacement(template: str) -> str:
    """Escape a replacement so only digit back-references stay live.

    - ``$1``, ``$12``, ``$0`` become ``${1}``, ``${12}``, ``${0}`` so text after
      the reference (``$1_v2``) cannot extend it.
    - ``$$`` passes through unchanged (already a literal dollar).
    - ``$`` before any other character is doubled (``$foo`` -> ``$$foo``).
    - A trailing ``$`` stays as is.

    Args:
        template: Raw replacement text from the caller

    Returns:
        Escaped template for ``compile_template``
    """
    out: list[str] = []
    state = _ScanState.NORMAL

    for ch in template:
        if state is _ScanState.IN_DIGIT_RUN:
            if ch.isascii() and ch.isdigit():
                out.append(ch)
                continue
            out.append("}")
            state = _ScanState.NORMAL

        if state is _ScanState.AFTER_DOLLAR:
            if ch.isascii() and ch.isdigit():
                out.append("${")
                out.append(ch)
                state = _ScanState.IN_DIGIT_RUN
            elif ch == "$":
                out.append("$$")
                state = _ScanState.NORMAL
            else:
                out.append("$$")
                out.append(ch)
                state = _ScanState.NORMAL
        elif ch == "$":
            state = _ScanState.AFTER_DOLLAR
        else:
            out.append(ch)

    if state is _ScanState.AFTER_DOLLAR:
        out.append("$")
    elif state is _ScanState.IN_DIGIT_RUN:
        out.append("}")

    return "".join(out)


def _is_ref_char(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalnum())


def _parse_template(template: str) -> list[TemplatePart]:
    """Split a dollar template into literals, group indexes and (name,) tuples."""
    parts: list[TemplatePart] = []
    literal: list[str] = []
    i = 0
    n = len(template)

    def ref(name: str) -> None:
        if literal:
            parts.append("".join(literal))
            literal.clear()
        parts.append(int(name) if name.isdigit() else (name,))

    while i < n:
        ch = template[i]
        if ch != "$" or i + 1 >= n:
            literal.append(ch)
            i += 1
            continue

        nxt = template[i + 1]
        if nxt == "$":
            literal.append("$")
            i += 2
        elif nxt == "{":
            close = template.find("}", i + 2)
            name = template[i + 2 : close] if close != -1 else ""
            if name and all(_is_ref_char(c) for c in name):
                ref(name)
                i = close + 1
            else:
                literal.append("$")
                i += 1
        elif _is_ref_char(nxt):
            j = i + 1
            while j < n and _is_ref_char(template[j]):
                j += 1
            ref(template[i + 1 : j])
            i = j
        else:
            literal.append("$")
            i += 1

    if literal:
        parts.append("".join(literal))
    return parts


def compile_template(template: str) -> Replacer:
    """Compile a dollar template into a replacement callable.

    Syntax: ``$$`` is a literal dollar, ``${ref}`` and ``$ref`` name a group
    (all digits = index). Unknown or non-participating groups expand to "".
    Any other ``$`` is literal.

    Args:
        template: Template text, normally the output of ``escape_replacement``

    Returns:
        Function taking a match and returning its replacement text
    """
    parts = _parse_template(template)

    # Literal-only templates skip per-match group lookups
    if all(isinstance(p, str) for p in parts):
        text = "".join(p for p in parts if isinstance(p, str))
        return lambda _m: text

    def replace(match: re.Match[str]) -> str:
        pattern = match.re
        pieces: list[str] = []
        for part in parts:
            if isinstance(part, str):
                pieces.append(part)
                continue
            if isinstance(part, int):
                if part > pattern.groups:
                    continue
                value = match.group(part)
            else:
                if part[0] not in pattern.groupindex:
                    continue
                value = match.group(part[0])
            if value is not None:
                pieces.append(value)
        return "".join(pieces)

    return replace
