"""
prooflang

Lexical analysis for a small formal proof/type language.

Architecture:
    prooflang/
    └── lexer/           # Tokenization (parsing and checking live downstream)

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, LexerConfig, Token, TokenType, tokenize_string

__all__ = [
    "Lexer",
    "LexerConfig",
    "Token",
    "TokenType",
    "tokenize_string",

    # Version info
    "__version__",
    "__license__",
]
