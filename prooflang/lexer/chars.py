"""Character classification for the scanner."""

from .tokens import SINGLE_CHARS


def is_ident_char(char: str) -> bool:
    """Check if character can continue an identifier."""
    return char.isalnum() or char == '_'


def is_ident_start(char: str) -> bool:
    """Check if character can start an identifier."""
    return char.isalpha() or char == '_'


def is_digit(char: str) -> bool:
    # Only digits int() accepts; '²' is not one
    return char.isdecimal()


def is_whitespace(char: str) -> bool:
    return char.isspace()


def is_single_char(char: str) -> bool:
    """Check if character is a one-character symbol token."""
    return char in SINGLE_CHARS
