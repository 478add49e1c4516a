"""
Token types produced by the rule tokenizer.
"""

from dataclasses import dataclass
from enum import Enum


AND_CHAR = '\u2227'   # ∧, same as ^
IMP_CHAR = '\u2192'   # →, same as ->
RING_CHAR = '\u02da'  # ˚, same as .


class TokenKind(Enum):
    """Closed set of token kinds"""
    END_OF_INPUT = "end_of_input"
    LONG = "long"
    DOUBLE = "double"
    SHORTNAME = "shortname"
    STRING = "string"
    COMMA = "comma"
    QUESTION = "question"
    LPAREN = "lparen"
    RPAREN = "rparen"
    RING = "ring"
    TYPE_QUAL = "type_qual"
    AND = "and"
    IMP = "imp"


@dataclass(frozen=True)
class Token:
    """A single token: its kind and the text it carries"""
    kind: TokenKind
    text: str

    @property
    def is_end_of_input(self) -> bool:
        return self.kind is TokenKind.END_OF_INPUT

    def __str__(self) -> str:
        return f"{self.kind.name}({self.text!r})"
