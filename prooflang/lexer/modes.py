"""Scanner states.

One state machine run recognizes exactly one token. The state only lives for
that run; nothing carries over to the next token.
"""

from enum import Enum, auto


class ScanState(Enum):
    """States of the single-token scanner.

    - START: skipping whitespace, dispatching on the first character
    - IDENTIFIER: inside a run of identifier characters
    - NUMERIC: inside the whole-number digit run
    - NUMERIC_POINT: past the decimal point, inside the fraction digit run
    - SINGLE: a one-character symbol, finalized immediately
    - POSSIBLE_ARROW: seen '-', deciding between '->' and OP_SUB
    """

    START = auto()
    IDENTIFIER = auto()
    NUMERIC = auto()
    NUMERIC_POINT = auto()
    SINGLE = auto()
    POSSIBLE_ARROW = auto()
