"""
prooflang Lexer - turns proof/type source text into tokens

Maximal munch over a small explicit state machine. Each scan recognizes one
token starting from START with an empty accumulator; the driver keeps
scanning until the input is used up.

The first error aborts the whole run. There is no recovery and no partial
token list.
"""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from .chars import is_digit, is_ident_char, is_ident_start, is_single_char, is_whitespace
from .config import DEFAULT_CONFIG, LexerConfig
from .errors import LexerError, create_unrecognized_character_error
from .modes import ScanState
from .resolver import DECIMAL_POINT, resolve, resolve_number
from .tokens import Token, canonical_text

logger = logging.getLogger(__name__)


def scan_token(
    source: str,
    pos: int = 0,
    config: Optional[LexerConfig] = None
) -> Tuple[Optional[Token], int]:
    """
    Scan a single token from ``source[pos:]``.

    Args:
        source: Full source text
        pos: Index to start scanning at
        config: Lexer configuration, DEFAULT_CONFIG when omitted

    Returns:
        (token, next_pos). The token is None when only whitespace was left,
        in which case next_pos == len(source).

    Raises:
        UnrecognizedCharacterError: START met a character no token begins with
        MalformedNumericLiteralError: A numeric literal has several points
    """
    config = config or DEFAULT_CONFIG
    length = len(source)
    state = ScanState.START
    buffer: List[str] = []
    start = pos

    while True:
        char = source[pos] if pos < length else None

        if state is ScanState.START:
            if char is None:
                return None, pos
            if is_whitespace(char):
                pos += 1
                start = pos
                continue

            if char == DECIMAL_POINT:
                # ".5" reads as "0.5"
                buffer.append('0')
                state = ScanState.NUMERIC_POINT
            elif char == '-':
                state = ScanState.POSSIBLE_ARROW
            elif is_ident_start(char):
                state = ScanState.IDENTIFIER
            elif is_digit(char):
                state = ScanState.NUMERIC
            elif is_single_char(char):
                state = ScanState.SINGLE
            else:
                raise create_unrecognized_character_error(source, pos)

            buffer.append(char)
            pos += 1

        elif state is ScanState.IDENTIFIER:
            if char is not None and is_ident_char(char):
                buffer.append(char)
                pos += 1
                continue
            return _finish(resolve(''.join(buffer), config), source, start, pos)

        elif state is ScanState.NUMERIC:
            if char is not None and is_digit(char):
                buffer.append(char)
                pos += 1
                continue
            if char == DECIMAL_POINT:
                buffer.append(char)
                pos += 1
                state = ScanState.NUMERIC_POINT
                continue
            return _finish(resolve_number(''.join(buffer), source, start), source, start, pos)

        elif state is ScanState.NUMERIC_POINT:
            # Extra points are accumulated; resolve_number rejects them
            if char is not None and (is_digit(char) or char == DECIMAL_POINT):
                buffer.append(char)
                pos += 1
                continue
            return _finish(resolve_number(''.join(buffer), source, start), source, start, pos)

        elif state is ScanState.POSSIBLE_ARROW:
            if char == '>':
                buffer.append(char)
                pos += 1
            return _finish(resolve(''.join(buffer), config), source, start, pos)

        elif state is ScanState.SINGLE:
            return _finish(resolve(''.join(buffer), config), source, start, pos)


def _finish(token: Token, source: str, start: int, end: int) -> Tuple[Token, int]:
    return replace(token, lexeme=source[start:end]), end


def scan_remaining(text: str, config: Optional[LexerConfig] = None) -> Tuple[Optional[Token], str]:
    """Scan one token from the front of ``text``; return it with the unconsumed rest."""
    token, pos = scan_token(text, 0, config)
    return token, text[pos:]


class Lexer:
    """
    prooflang lexical analyzer.

    Holds only its configuration, so one instance can tokenize any number of
    sources, from any number of threads.
    """

    def __init__(self, config: Optional[LexerConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def tokenize(self, source: str) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens, without an end-of-input sentinel

        Raises:
            LexerError: On the first unrecognized character or malformed number
        """
        tokens: List[Token] = []
        pos = 0
        length = len(source)

        try:
            while pos < length:
                token, pos = scan_token(source, pos, self.config)
                if token is not None:
                    tokens.append(token)
        except LexerError as e:
            logger.debug("Tokenization failed at offset %d: %s", e.offset, e.diagnostic.message)
            raise

        logger.debug("Tokenized %d characters into %d tokens", length, len(tokens))
        return tokens


def tokenize_string(source: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(config).tokenize(source)


def render_tokens(tokens: Iterable[Token], config: Optional[LexerConfig] = None) -> str:
    """
    Join the canonical text of each token with single spaces.

    For tokens the lexer can produce, tokenizing the result gives the same
    sequence back.
    """
    return ' '.join(canonical_text(token, config) for token in tokens)
