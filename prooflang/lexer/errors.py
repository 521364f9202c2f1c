"""
Error handling for the prooflang lexer.

Lexing is all-or-nothing: the first error aborts tokenization and no partial
token list is returned. Errors carry a Diagnostic with the offending input,
an error code and, where possible, suggestions.
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """Structured description of a lexer error."""
    message: str
    offset: int                     # Character offset into the source
    context: str                    # Remaining input at the point of failure
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        result = "ERROR"
        if self.code:
            result += f"[{self.code}]"
        result += f": {self.message}\n"
        result += f"  --> offset {self.offset}: {_preview(self.context)!r}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


def _preview(text: str, limit: int = 20) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


class LexerError(Exception):
    """
    Base class for fatal lexer errors.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        offset: int,
        context: str,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            offset=offset,
            context=context,
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def offset(self) -> int:
        return self.diagnostic.offset

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnrecognizedCharacterError(LexerError):
    """Raised when the scanner meets a character that cannot start any token."""

    def __init__(self, char: str, remaining: str, offset: int, **kwargs):
        super().__init__(f"Unrecognized character: {char!r}", offset, remaining, **kwargs)
        self.char = char
        self.remaining = remaining


class MalformedNumericLiteralError(LexerError):
    """Raised when a numeric literal does not split into a whole/frac pair."""

    def __init__(self, lexeme: str, offset: int, context: str, **kwargs):
        super().__init__(f"Malformed numeric literal: {lexeme!r}", offset, context, **kwargs)
        self.lexeme = lexeme


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unrecognized character",
    "L003": "Malformed numeric literal",
}

# ASCII characters people reach for when they mean one of the logic symbols
UNICODE_ALTERNATIVES = {
    '&': ['∧'],
    '|': ['∨'],
    '!': ['¬'],
    '~': ['¬'],
    '^': ['∧'],
}


def suggest_unicode_alternatives(char: str) -> List[str]:
    """Suggest Unicode logic symbols for an unsupported ASCII character."""
    return list(UNICODE_ALTERNATIVES.get(char, []))


def create_unrecognized_character_error(source: str, offset: int) -> UnrecognizedCharacterError:
    """Create an error for the character at ``source[offset]``."""
    char = source[offset]
    suggestions = suggest_unicode_alternatives(char)

    if suggestions:
        help_text = f"Did you mean one of these symbols: {', '.join(suggestions)}?"
    elif char.isprintable():
        help_text = f"The character {char!r} is not valid in prooflang source."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return UnrecognizedCharacterError(
        char,
        source[offset:],
        offset,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_malformed_number_error(lexeme: str, source: str, offset: int) -> MalformedNumericLiteralError:
    """Create an error for a literal with more than one decimal point."""
    return MalformedNumericLiteralError(
        lexeme,
        offset,
        source[offset:],
        code="L003",
        help_text="A numeric literal may contain at most one decimal point.",
        suggestions=["Separate the numbers with whitespace or an operator"]
    )
