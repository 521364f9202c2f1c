"""
prooflang Lexer Package

Maximal-munch tokenizer for the prooflang proof/type language.

Key Features:
- Unicode logic symbols (∀, ∃, →, ∧, ∨, ⊥, ¬) and the ASCII arrow '->'
- ASCII keyword aliases, in historical (reversed) or natural spelling
- Number literals split into independent whole/fraction integers
- All-or-nothing tokenization with structured errors
"""

from .tokens import Token, TokenType, NumberValue, canonical_text
from .modes import ScanState
from .config import LexerConfig, DEFAULT_CONFIG
from .lexer import Lexer, scan_token, scan_remaining, tokenize_string, render_tokens
from .errors import LexerError, UnrecognizedCharacterError, MalformedNumericLiteralError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "NumberValue",
    "ScanState",
    "LexerConfig",
    "DEFAULT_CONFIG",
    "scan_token",
    "scan_remaining",
    "tokenize_string",
    "render_tokens",
    "canonical_text",
    "LexerError",
    "UnrecognizedCharacterError",
    "MalformedNumericLiteralError",
]
