"""
Tokenizer for HornLog rule text.

Turns text such as

    Person(?p) ^ hasAge(?p, ?a) ^ swrlb:greaterThan(?a, 17) -> Adult(?p)

into a fixed tuple of tokens. The whole input is tokenized when the
session is created; the grammar layer then walks the tuple with
peek/next/skip and may rewind it with reset.

Truncated input (text that stops in the middle of an operator, an IRI or a
string, or a grammar asking for a token past the end) raises
IncompleteRuleError when the session is interactive, so an editor can tell
"still typing" apart from "wrong". Outside interactive mode the same
conditions raise a plain RuleParseError.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional, Set, Tuple

from .errors import IncompleteRuleError, RuleParseError
from .tokens import AND_CHAR, IMP_CHAR, RING_CHAR, Token, TokenKind

logger = logging.getLogger(__name__)


# Words may contain ':', '_', '/' and '#' so prefixed names and IRIs stay whole
_WORD = re.compile(r'(?:[^\W\d]|[:/#])(?:\w|[:/#])*')
_NUMBER = re.compile(r'[0-9]+(?:\.[0-9]+)?')

_ESCAPES = {'n': '\n', 't': '\t', 'r': '\r', 'b': '\b', 'f': '\f'}
_QUOTES = ('"', "'")

_SINGLE_CHAR_TOKENS = {
    ',': TokenKind.COMMA,
    '?': TokenKind.QUESTION,
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
}

# Raw lexeme types read from the character stream
_EOF = "eof"
_WORD_LEXEME = "word"
_NUMBER_LEXEME = "number"
_STRING_LEXEME = "string"
_CHAR_LEXEME = "char"


@dataclass(frozen=True)
class _Lexeme:
    type: str
    value: Any = None

    def is_char(self, *chars: str) -> bool:
        return self.type == _CHAR_LEXEME and self.value in chars


class Tokenizer:
    """
    A tokenizing session over one rule text.

    Args:
        text: The rule text
        interactive: Report truncated input as IncompleteRuleError

    Raises:
        RuleParseError: The text contains invalid syntax
        IncompleteRuleError: The text is truncated (interactive mode only)

    Examples:
        >>> t = Tokenizer("p(?x) -> q(?x)")
        >>> t.next().text
        'p'
        >>> t.peek().kind
        <TokenKind.LPAREN: 'lparen'>
    """

    def __init__(self, text: str, interactive: bool = False):
        self._text = text
        self._interactive = interactive
        self._variables: Set[str] = set()

        # Scanner state, only used while building the token tuple
        self._offset = 0
        self._pushed_back: Optional[_Lexeme] = None

        self._tokens = self._generate_tokens()
        self._position = 0

        logger.debug(f"Tokenized {len(self._tokens)} tokens from {len(text)} characters")

    @classmethod
    def from_config(cls, text: str, config=None) -> "Tokenizer":
        """Create a session using the tokenizer settings of a HornLogConfig"""
        if config is None:
            from .config import get_config
            config = get_config()
        return cls(text, interactive=config.tokenizer.interactive)

    @property
    def text(self) -> str:
        return self._text

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    @property
    def position(self) -> int:
        """Index of the next token to be returned"""
        return self._position

    @property
    def interactive(self) -> bool:
        return self._interactive

    def __len__(self) -> int:
        return len(self._tokens)

    # Token queries

    def reset(self) -> None:
        """Rewind to the first token"""
        self._position = 0

    def has_more(self) -> bool:
        return self._position < len(self._tokens)

    def peek(self) -> Token:
        """Return the next token without consuming it"""
        if not self.has_more():
            raise self._end_of_rule_error("End of rule reached!")
        return self._tokens[self._position]

    def next(self, expected: Optional[TokenKind] = None,
             message: str = "Incomplete rule!") -> Token:
        """
        Consume and return the next token.

        Args:
            expected: If given, the token must be of this kind
            message: Error message for a missing or unexpected token

        Raises:
            RuleParseError: The token is not of the expected kind, or no
                tokens remain outside interactive mode
            IncompleteRuleError: No tokens remain in interactive mode
        """
        if not self.has_more():
            raise self._end_of_rule_error(message)

        token = self._tokens[self._position]
        self._position += 1

        if expected is not None and token.kind is not expected:
            raise RuleParseError(message)
        return token

    def skip(self) -> None:
        if not self.has_more():
            raise self._end_of_rule_error("End of rule reached unexpectedly!")
        self._position += 1

    def expect_and_skip(self, kind: TokenKind, message: str) -> None:
        """Consume the next token, which must be of the given kind"""
        if not self.has_more():
            raise self._end_of_rule_error(message)

        token = self.next()
        if token.kind is not kind:
            raise RuleParseError(f"{message}, got '{token.text}'")

    def expect_and_skip_lparen(self, message: str) -> None:
        self.expect_and_skip(TokenKind.LPAREN, message)

    def expect_and_skip_rparen(self, message: str) -> None:
        self.expect_and_skip(TokenKind.RPAREN, message)

    def expect_and_skip_comma(self, message: str) -> None:
        self.expect_and_skip(TokenKind.COMMA, message)

    # Variable bookkeeping for the grammar layer

    def register_variable(self, name: str) -> None:
        self._variables.add(name)

    def has_variable(self, name: str) -> bool:
        return name in self._variables

    # Token generation

    def _generate_tokens(self) -> Tuple[Token, ...]:
        tokens = []
        token = self._generate_token()
        while not token.is_end_of_input:
            tokens.append(token)
            token = self._generate_token()
        return tuple(tokens)

    def _generate_token(self) -> Token:
        lexeme = self._read_lexeme()

        if lexeme.type == _EOF:
            return Token(TokenKind.END_OF_INPUT, "")
        if lexeme.type == _WORD_LEXEME:
            return Token(TokenKind.SHORTNAME, lexeme.value)
        if lexeme.type == _STRING_LEXEME:
            return Token(TokenKind.STRING, lexeme.value)
        if lexeme.type == _NUMBER_LEXEME:
            return self._number_token(lexeme.value)

        char = lexeme.value

        if char in _SINGLE_CHAR_TOKENS:
            return Token(_SINGLE_CHAR_TOKENS[char], char)

        if char in ('.', RING_CHAR):
            return Token(TokenKind.RING, ".")

        if char in ('^', AND_CHAR):
            following = self._read_lexeme()
            if following.is_char('^', AND_CHAR):
                return Token(TokenKind.TYPE_QUAL, "^^")
            self._push_back(following)
            return Token(TokenKind.AND, "^")

        if char == IMP_CHAR:
            return Token(TokenKind.IMP, "->")

        if char == '-':
            following = self._read_lexeme()
            if following.is_char('>'):
                return Token(TokenKind.IMP, "->")
            if following.type == _EOF:
                raise self._end_of_rule_error("Expecting '>' after '-'")
            raise RuleParseError("Expecting '>' after '-' for implication")

        if char == '<':
            return self._iri_token()

        raise RuleParseError(f"Unexpected character '{char}'")

    def _iri_token(self) -> Token:
        """Read the rest of '<' IRI '>' after the opening bracket"""
        iri = self._read_lexeme()
        if iri.type == _EOF:
            raise self._end_of_rule_error("Expecting IRI after '<'")
        if iri.type != _WORD_LEXEME:
            raise RuleParseError("Expecting IRI after '<'")

        closing = self._read_lexeme()
        if closing.is_char('>'):
            return Token(TokenKind.SHORTNAME, iri.value)
        if closing.type == _EOF:
            raise self._end_of_rule_error("Expecting '>' after IRI")
        raise RuleParseError(f"Expecting '>' after IRI '{iri.value}'")

    @staticmethod
    def _number_token(literal: str) -> Token:
        # The syntax has no float marker, so integral values are longs
        value = float(literal)
        if value.is_integer():
            digits = literal.split('.')[0].lstrip('0') or '0'
            return Token(TokenKind.LONG, digits)
        return Token(TokenKind.DOUBLE, repr(value))

    # Character scanning

    def _push_back(self, lexeme: _Lexeme) -> None:
        # Only one lexeme of lookahead is ever needed
        self._pushed_back = lexeme

    def _read_lexeme(self) -> _Lexeme:
        if self._pushed_back is not None:
            lexeme, self._pushed_back = self._pushed_back, None
            return lexeme

        text = self._text
        while self._offset < len(text) and text[self._offset].isspace():
            self._offset += 1
        if self._offset >= len(text):
            return _Lexeme(_EOF)

        match = _NUMBER.match(text, self._offset)
        if match:
            self._offset = match.end()
            return _Lexeme(_NUMBER_LEXEME, match.group())

        match = _WORD.match(text, self._offset)
        if match:
            self._offset = match.end()
            return _Lexeme(_WORD_LEXEME, match.group())

        char = text[self._offset]
        self._offset += 1
        if char in _QUOTES:
            return _Lexeme(_STRING_LEXEME, self._read_string_body(char))
        return _Lexeme(_CHAR_LEXEME, char)

    def _read_string_body(self, quote: str) -> str:
        """Read up to the matching closing quote, removing escapes"""
        text = self._text
        chars = []
        while self._offset < len(text):
            char = text[self._offset]
            self._offset += 1
            if char == quote:
                return ''.join(chars)
            if char == '\\':
                if self._offset >= len(text):
                    break
                escaped = text[self._offset]
                self._offset += 1
                chars.append(_ESCAPES.get(escaped, escaped))
            else:
                chars.append(char)
        raise self._end_of_rule_error("Unterminated string literal")

    def _end_of_rule_error(self, message: str) -> RuleParseError:
        if self._interactive:
            return IncompleteRuleError(message)
        return RuleParseError(message)


def tokenize(text: str, interactive: bool = False) -> Tuple[Token, ...]:
    """
    Tokenize rule text in one call.

    Examples:
        >>> [t.kind.name for t in tokenize("^(")]
        ['AND', 'LPAREN']
        >>> tokenize("<http://x#p>")[0].text
        'http://x#p'
    """
    return Tokenizer(text, interactive).tokens
