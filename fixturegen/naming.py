"""Identifier derivation for generated accessor bindings."""

from __future__ import annotations

_WORD_DELIMITERS = {"_", "-", ".", " "}


def derive_identifier(path: str, prefix: str) -> str:
    """Turn a file path into an UpperCamelCase identifier.

    ``prefix`` is removed when ``path`` starts with it, the extension of the
    final path element is dropped and the remaining separators become word
    boundaries::

        >>> derive_identifier("src/foo_bar/baz.cpp", "src/")
        'FooBarBaz'

    Uniqueness is not checked here; callers that build a batch of names are
    expected to detect collisions.
    """
    if prefix and path.startswith(prefix):
        path = path[len(prefix):]
    path = _strip_extension(path)
    return to_camel(path.replace("/", "_"))


def to_camel(text: str) -> str:
    """Convert ``text`` to UpperCamelCase.

    Letters following a delimiter (``_ - .`` or space) or a digit are
    upper-cased, the first letter is upper-cased, other letters keep their
    case. Digits are kept; any other character is dropped.
    """
    out: list[str] = []
    cap_next = True
    for char in text.strip():
        if char.isascii() and char.isalpha():
            out.append(char.upper() if cap_next else char)
            cap_next = False
        elif char.isascii() and char.isdigit():
            out.append(char)
            cap_next = True
        else:
            cap_next = char in _WORD_DELIMITERS
    return "".join(out)


def _strip_extension(path: str) -> str:
    head, sep, base = path.rpartition("/")
    dot = base.rfind(".")
    if dot == -1:
        return path
    return f"{head}{sep}{base[:dot]}"


__all__ = ["derive_identifier", "to_camel"]
