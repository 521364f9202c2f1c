"""Lexer configuration.

A frozen dataclass is passed to the lexer once and read by every scan.

Usage:
    from prooflang.lexer import Lexer, LexerConfig

    lexer = Lexer(LexerConfig(natural_keywords=True))
    tokens = lexer.tokenize("forall x, x")
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class LexerConfig:
    """Immutable lexer configuration.

    Attributes:
        natural_keywords: Match the ASCII keyword aliases (forall, exists,
            and, or, type, typeof, val) in their natural spelling. When
            False the historical reversed spellings (llarof, stsixe, dna,
            ro, epyt, foepyt, lav) are the ones that resolve to keywords
            and the natural spellings lex as identifiers.
    """

    natural_keywords: bool = False

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "LexerConfig":
        """Create a LexerConfig from a mapping, ignoring unknown keys."""
        valid_fields = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in valid_fields})


DEFAULT_CONFIG = LexerConfig()
