"""Token and TokenType definitions for the treetext lexer.

The lexer produces a stream of Token objects that the parser consumes.
Each Token has a type, value, and source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto

from treetext.location import SourceLocation

OPEN_PAREN = "("
CLOSE_PAREN = ")"


class TokenType(Enum):
    """Token types produced by the lexer."""

    OPEN = auto()  # (
    CLOSE = auto()  # )
    VALUE = auto()  # node label, no whitespace and no parentheses


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw string value from source
        location: Where the token starts in the source

    """

    type: TokenType
    value: str
    location: SourceLocation

    @property
    def is_paren(self) -> bool:
        return self.type is not TokenType.VALUE

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.location})"
