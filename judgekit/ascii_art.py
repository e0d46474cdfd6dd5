"""Fixed pictures and greetings printed exactly as given."""

from __future__ import annotations

_HELLO_WORLD = "Hello World!"

_CAT = "\n".join(
    [
        "\\    /\\",
        " )  ( ')",
        "(  /  )",
        " \\(__)|",
    ]
)

_DOG = "\n".join(
    [
        "|\\_/|",
        "|q p|   /}",
        "( 0 )\"\"\"\\",
        "|\"^\"`    |",
        "||_/=\\\\__|",
    ]
)

_SPROUT = "\n".join(
    [
        " ,r'\"7",
        "r`-_ ,' ,/",
        " \\. \". L_r'",
        " `~\\/",
        "   |",
        "   |",
    ]
)


def hello_world() -> str:
    """Return the classic greeting."""
    return _HELLO_WORLD


def cat() -> str:
    """Return the cat picture, lines joined by newlines, no trailing newline."""
    return _CAT


def dog() -> str:
    """Return the dog picture, lines joined by newlines, no trailing newline."""
    return _DOG


def sprout() -> str:
    """Return the sprout picture, lines joined by newlines, no trailing newline."""
    return _SPROUT