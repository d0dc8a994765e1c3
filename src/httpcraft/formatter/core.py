"""
Single-pass JSON re-indenter.

The formatter never builds a tree and never validates its input. It walks
the text once, tracking whether it is inside a string literal and how deep
the bracket nesting is, and rewrites whitespace around structural
characters. Malformed input produces best-effort output, never an error.

Copyright (c) 2025 httpcraft contributors.
All rights reserved.
"""

from enum import Enum

OPENERS = "{["
CLOSERS = "}]"
WHITESPACE = " \t\r\n"
INDENT = "  "


class State(str, Enum):
    """Lexer state."""
    NORMAL = "normal"
    IN_STRING = "in_string"


def looks_like_json(text: str) -> bool:
    """Check if text starts like a JSON object or array."""
    return text[:1] in ("{", "[")


def _next_significant(text: str, start: int) -> str:
    """Return the first non-whitespace character at or after start."""
    for j in range(start, len(text)):
        if text[j] not in WHITESPACE:
            return text[j]
    return ""


def _newline(depth: int) -> str:
    return "\n" + INDENT * max(depth, 0)


def format_json(text: str) -> str:
    """Re-indent JSON text with two spaces per nesting level.

    Empty containers stay inline (``{}``, ``[]``), every ``:`` outside a
    string becomes ``": "``, and whitespace outside strings is dropped.

    Args:
        text: Raw text believed to be JSON

    Returns:
        Re-indented text, without a trailing newline
    """
    out: list[str] = []
    state = State.NORMAL
    escaped = False
    depth = 0
    prev = ""

    for i, ch in enumerate(text):
        if state is State.IN_STRING:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                state = State.NORMAL
            prev = ch
            continue

        if ch in WHITESPACE:
            continue

        if ch == '"':
            state = State.IN_STRING
            out.append(ch)
        elif ch in OPENERS:
            out.append(ch)
            depth += 1
            following = _next_significant(text, i + 1)
            if following and following not in CLOSERS:
                out.append(_newline(depth))
        elif ch in CLOSERS:
            depth -= 1
            if not prev or prev not in OPENERS:
                out.append(_newline(depth))
            out.append(ch)
        elif ch == ",":
            out.append(ch)
            out.append(_newline(depth))
        elif ch == ":":
            out.append(": ")
        else:
            out.append(ch)

        prev = ch

    return "".join(out)
