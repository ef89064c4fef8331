"""
Parser for begin-marker directives

Turns directive text such as ``code_table('a.js', 'b.hpp')`` into a
Directive. Tokenizing is done by the DirectiveLexer from get_lexer(); this module walks the
token stream and enforces the call grammar:

    directive := NAME '(' [ STRING { ',' STRING } ] ')'

Whitespace may appear between any two tokens. Anything else raises
DirectiveParseError with the offending column.

Example:
    >>> DirectiveParser(" code_table('f1.txt','f2.txt') ").parse()
    Directive(name='code_table', args=['f1.txt', 'f2.txt'])
"""

import re
from typing import Any, List, Optional, Tuple

from pygments.token import Error, Name, Punctuation, String, Whitespace

from ..models.directives import Directive
from .exceptions import DirectiveParseError
from .lexer import get_lexer
from .log import LOG

Token = Tuple[int, Any, str]

_escape_re = re.compile(r'\\(.)', re.DOTALL)


class DirectiveParser:
    """
    Parser for the directive call embedded in a begin marker

    Attributes:
        source: Directive text (everything between the marker tokens)
        tokens: Significant tokens (whitespace removed) as (column, type, value)
        position: Index of the next unread token
    """

    def __init__(self, source: str):
        self.source = source
        self.tokens: List[Token] = []
        self.position = 0

    def tokens_scan(self) -> List[Token]:
        """
        Tokenize the source, dropping whitespace

        Raises:
            DirectiveParseError: on the first character the lexer rejects
        """
        tokens: List[Token] = []
        for column, token_type, value in get_lexer().get_tokens_unprocessed(self.source):
            if token_type in Whitespace:
                continue
            if token_type is Error:
                raise DirectiveParseError(
                    f"Unexpected character {value!r} at column {column} in directive {self.source.strip()!r}"
                )
            tokens.append((column, token_type, value))
        LOG(f"Directive tokens: {tokens}", level=3)
        return tokens

    def token_next(self) -> Optional[Token]:
        """Return the next token and advance, or None at end of input"""
        if self.position >= len(self.tokens):
            return None
        token = self.tokens[self.position]
        self.position += 1
        return token

    def token_expect(self, token_type: Any, value: Optional[str], what: str) -> Token:
        """
        Consume the next token, requiring its type (and value, if given)

        Raises:
            DirectiveParseError: end of input or a different token
        """
        token = self.token_next()
        if token is None:
            raise DirectiveParseError(f"Expected {what} at end of directive {self.source.strip()!r}")
        column, actual_type, actual_value = token
        if actual_type not in token_type or (value is not None and actual_value != value):
            raise DirectiveParseError(
                f"Expected {what} at column {column}, found {actual_value!r}"
            )
        return token

    def arguments_parse(self) -> List[str]:
        """Read the argument list after '(' up to and including ')'"""
        args: List[str] = []
        token = self.token_next()
        if token is None:
            raise DirectiveParseError(f"Unterminated argument list in directive {self.source.strip()!r}")
        if token[1] in Punctuation and token[2] == ')':
            return args

        self.position -= 1
        while True:
            _, _, literal = self.token_expect(String, None, "a quoted argument")
            args.append(string_unquote(literal))

            token = self.token_next()
            if token is None:
                raise DirectiveParseError(
                    f"Unterminated argument list in directive {self.source.strip()!r}"
                )
            column, token_type, value = token
            if token_type in Punctuation and value == ')':
                return args
            if not (token_type in Punctuation and value == ','):
                raise DirectiveParseError(f"Expected ',' or ')' at column {column}, found {value!r}")

    def parse(self) -> Directive:
        """
        Parse the directive text

        Returns:
            Directive with command name and unquoted arguments

        Raises:
            DirectiveParseError: if the text is not a single well-formed call
        """
        self.tokens = self.tokens_scan()
        self.position = 0

        if not self.tokens:
            raise DirectiveParseError("Empty directive")

        _, _, name = self.token_expect(Name.Function, None, "a command name")
        self.token_expect(Punctuation, '(', "'('")
        args = self.arguments_parse()

        trailing = self.token_next()
        if trailing is not None:
            raise DirectiveParseError(
                f"Unexpected {trailing[2]!r} at column {trailing[0]} after directive call"
            )

        return Directive(name=name, args=args)


def string_unquote(literal: str) -> str:
    """
    Strip the quotes from a string literal and resolve backslash escapes

    Example:
        >>> string_unquote(r"'it\\'s'")
        "it's"
    """
    return _escape_re.sub(r'\1', literal[1:-1])


def directive_parse(source: str) -> Directive:
    """Parse directive text into a Directive (see DirectiveParser)"""
    return DirectiveParser(source).parse()
