"""
Token definitions for the prooflang lexer.

This module defines every token the lexer can produce:
- Quantifiers and logical connectives (Unicode symbols plus ASCII aliases)
- Arithmetic and comparison operators
- Number literals (whole part + fractional digit run)
- Identifiers
- Punctuation and delimiters

Tokens carry no source position. Downstream consumers that need positions
have to track them on their own.
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .config import LexerConfig


class TokenType(Enum):
    """
    Closed set of token variants.

    Grouped by category, same order the resolver tables use.
    """

    # ========================================================================
    # Literals and Identifiers
    # ========================================================================
    IDENTIFIER = auto()             # x, f, my_lemma, =
    NUMBER = auto()                 # 42, 3.14, .5

    # ========================================================================
    # Keywords
    # ========================================================================
    FORALL = auto()                 # ∀
    EXISTS = auto()                 # ∃
    TYPE = auto()                   # type (alias only)
    TYPEOF = auto()                 # typeof (alias only)
    VAL = auto()                    # val (alias only)

    # ========================================================================
    # Operators
    # ========================================================================
    OP_ADD = auto()                 # +
    OP_SUB = auto()                 # -
    OP_MUL = auto()                 # *
    OP_DIV = auto()                 # /
    OP_MOD = auto()                 # %
    OP_LT = auto()                  # <
    OP_GT = auto()                  # >

    # Logical (Unicode, with ASCII aliases for and/or)
    OP_AND = auto()                 # ∧
    OP_OR = auto()                  # ∨
    NEGATION = auto()               # ¬ (no ASCII alias)
    BOTTOM = auto()                 # ⊥ (no ASCII alias)

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACKET = auto()           # [
    RIGHT_BRACKET = auto()          # ]
    COMMA = auto()                  # ,
    COLON = auto()                  # :
    ARROW = auto()                  # → or ->


@dataclass(frozen=True)
class NumberValue:
    """
    Value of a NUMBER token.

    ``whole`` and ``frac`` are parsed independently from the digit runs on
    either side of the decimal point. ``frac`` is an integer, not a decimal
    fraction: ``3.05`` gives ``frac == 5``.
    """
    whole: int
    frac: int = 0

    def __str__(self) -> str:
        if self.frac:
            return f"{format_digit_run(self.whole)}.{format_digit_run(self.frac)}"
        return format_digit_run(self.whole)


# Digit runs are converted in chunks well below the interpreter's
# int/str conversion limit (sys.get_int_max_str_digits), so literals of
# any length round-trip.
DIGIT_CHUNK = 1000


def parse_digit_run(digits: str) -> int:
    """Parse a run of decimal digits of any length. An empty run is 0."""
    value = 0
    for i in range(0, len(digits), DIGIT_CHUNK):
        chunk = digits[i:i + DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def format_digit_run(value: int) -> str:
    """Inverse of parse_digit_run for non-negative ints."""
    base = 10 ** DIGIT_CHUNK
    if value < base:
        return str(value)

    chunks = []
    while value:
        value, rem = divmod(value, base)
        chunks.append(rem)
    head = str(chunks.pop())
    return head + ''.join(f"{chunk:0{DIGIT_CHUNK}d}" for chunk in reversed(chunks))


@dataclass(frozen=True)
class Token:
    """
    A lexical token of the prooflang language.

    ``value`` holds the identifier text for IDENTIFIER, a NumberValue for
    NUMBER, and None for every other variant. ``lexeme`` is the raw source
    text and does not take part in equality, so ``->`` and ``→`` produce
    equal ARROW tokens.
    """
    type: TokenType
    value: Any = None
    lexeme: str = field(default="", compare=False)

    @classmethod
    def identifier(cls, text: str) -> "Token":
        return cls(TokenType.IDENTIFIER, text, text)

    @classmethod
    def number(cls, whole: int, frac: int = 0, lexeme: str = "") -> "Token":
        return cls(TokenType.NUMBER, NumberValue(whole, frac), lexeme)

    @classmethod
    def symbol(cls, token_type: TokenType, lexeme: str = "") -> "Token":
        if token_type in (TokenType.IDENTIFIER, TokenType.NUMBER):
            raise ValueError(f"{token_type.name} tokens carry a value, use the dedicated constructor")
        return cls(token_type, None, lexeme)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value})"
        return self.type.name

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER

    @property
    def is_number(self) -> bool:
        """Check if this token is a number literal."""
        return self.type == TokenType.NUMBER

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a quantifier or type keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an arithmetic, comparison or logical operator."""
        return self.type in OPERATOR_TYPES


# Lookup tables used by the classifier and the resolver

# Characters that always form a token by themselves. '-' is listed too but
# the scanner routes it through the arrow lookahead first.
SINGLE_CHARS = frozenset("()[]<>+-,=%*/:∀∃→∧∨⊥¬")

SYMBOLS: Dict[str, TokenType] = {
    # Quantifiers and logic (Unicode)
    "∀": TokenType.FORALL,
    "∃": TokenType.EXISTS,
    "→": TokenType.ARROW,
    "∧": TokenType.OP_AND,
    "∨": TokenType.OP_OR,
    "⊥": TokenType.BOTTOM,
    "¬": TokenType.NEGATION,

    # ASCII digraph
    "->": TokenType.ARROW,

    # Arithmetic and comparison
    "+": TokenType.OP_ADD,
    "-": TokenType.OP_SUB,
    "*": TokenType.OP_MUL,
    "/": TokenType.OP_DIV,
    "%": TokenType.OP_MOD,
    "<": TokenType.OP_LT,
    ">": TokenType.OP_GT,

    # Punctuation
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
}

# ASCII keyword spellings. There is deliberately no alias for ¬ or ⊥.
KEYWORD_ALIASES: Dict[str, TokenType] = {
    "forall": TokenType.FORALL,
    "exists": TokenType.EXISTS,
    "and": TokenType.OP_AND,
    "or": TokenType.OP_OR,
    "type": TokenType.TYPE,
    "typeof": TokenType.TYPEOF,
    "val": TokenType.VAL,
}

# Historical spellings: the aliases used to be matched against a reversed
# accumulator, so "dna" is what actually produces OP_AND.
REVERSED_KEYWORD_ALIASES: Dict[str, TokenType] = {
    spelling[::-1]: token_type for spelling, token_type in KEYWORD_ALIASES.items()
}

KEYWORD_TYPES = frozenset({
    TokenType.FORALL, TokenType.EXISTS,
    TokenType.TYPE, TokenType.TYPEOF, TokenType.VAL,
})

OPERATOR_TYPES = frozenset({
    TokenType.OP_ADD, TokenType.OP_SUB, TokenType.OP_MUL, TokenType.OP_DIV,
    TokenType.OP_MOD, TokenType.OP_LT, TokenType.OP_GT,
    TokenType.OP_AND, TokenType.OP_OR, TokenType.NEGATION,
})


def canonical_text(token: Token, config: Optional["LexerConfig"] = None) -> str:
    """
    Return source text that lexes back to ``token``.

    Symbols prefer their Unicode spelling. TYPE, TYPEOF and VAL only have
    ASCII spellings, so their form depends on which alias table is active.
    """
    if token.type == TokenType.IDENTIFIER:
        return token.value
    if token.type == TokenType.NUMBER:
        return str(token.value)

    for text, token_type in SYMBOLS.items():
        if token_type == token.type:
            return text

    natural = config is not None and config.natural_keywords
    aliases = KEYWORD_ALIASES if natural else REVERSED_KEYWORD_ALIASES
    for text, token_type in aliases.items():
        if token_type == token.type:
            return text

    raise ValueError(f"No textual form for token {token}")
