"""
Token resolution: turns a finished accumulation into a Token.

Symbols are looked up first, then the ASCII keyword aliases selected by the
configuration. Anything else is an identifier.
"""

from typing import Optional

from .config import DEFAULT_CONFIG, LexerConfig
from .errors import create_malformed_number_error
from .tokens import (
    Token, TokenType, SYMBOLS, KEYWORD_ALIASES, REVERSED_KEYWORD_ALIASES, parse_digit_run
)

DECIMAL_POINT = '.'


def resolve(text: str, config: Optional[LexerConfig] = None) -> Token:
    """
    Resolve accumulated text to a symbol, keyword or identifier token.

    Args:
        text: Accumulated characters in reading order
        config: Lexer configuration, DEFAULT_CONFIG when omitted

    Returns:
        The matching token; Identifier(text) when nothing matches
    """
    config = config or DEFAULT_CONFIG

    token_type = SYMBOLS.get(text)
    if token_type is not None:
        return Token.symbol(token_type, text)

    aliases = KEYWORD_ALIASES if config.natural_keywords else REVERSED_KEYWORD_ALIASES
    token_type = aliases.get(text)
    if token_type is not None:
        return Token.symbol(token_type, text)

    return Token.identifier(text)


def resolve_number(text: str, source: str = "", offset: int = 0) -> Token:
    """
    Resolve a numeric accumulation to a NUMBER token.

    The text is either a plain digit run or ``whole.frac``. Each side is
    parsed as its own integer, so ``3.05`` gives ``frac == 5``. An empty
    fraction run (``5.``) counts as 0.

    Raises:
        MalformedNumericLiteralError: If the text has more than one point
    """
    if DECIMAL_POINT not in text:
        return Token.number(parse_digit_run(text), 0, text)

    parts = text.split(DECIMAL_POINT)
    if len(parts) != 2:
        raise create_malformed_number_error(text, source or text, offset)

    whole, frac = parts
    return Token.number(parse_digit_run(whole), parse_digit_run(frac), text)


def is_reserved(text: str, config: Optional[LexerConfig] = None) -> bool:
    """Check if text would resolve to anything other than an identifier."""
    return resolve(text, config).type != TokenType.IDENTIFIER
