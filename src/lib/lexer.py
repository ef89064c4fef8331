"""
Pygments lexer for mdautogen directive calls

Tokenizes the directive text embedded in a begin marker, e.g.

    code_table('example01.js', 'example01.hpp')

Token types:
- Name.Function: Command name
- Punctuation: Parentheses and argument separators
- String.Single / String.Double: Quoted arguments
- Whitespace: Spacing between tokens
- Error: Any character the directive grammar does not allow
"""

from pygments.lexer import RegexLexer
from pygments.token import (
    Name,
    Punctuation,
    String,
    Whitespace,
)


class DirectiveLexer(RegexLexer):
    """
    Lexer for the command-call syntax used inside begin markers

    Only string literals are accepted as arguments; bare words, numbers or
    nested calls inside the parentheses come out as Error tokens.

    Example:
        code_table('a.js', "b.hpp")

    Tokens:
        code_table → Name.Function
        ( → Punctuation
        'a.js' → String.Single
        , → Punctuation
        "b.hpp" → String.Double
        ) → Punctuation
    """

    name = 'mdautogen directive'
    aliases = ['mdautogen-directive']
    filenames = []

    tokens = {
        'root': [
            (r'\s+', Whitespace),
            (r'[A-Za-z_]\w*', Name.Function),
            (r'\(', Punctuation, 'arguments'),
        ],

        'arguments': [
            (r'\s+', Whitespace),
            (r"'(?:[^'\\]|\\.)*'", String.Single),
            (r'"(?:[^"\\]|\\.)*"', String.Double),
            (r',', Punctuation),
            (r'\)', Punctuation, '#pop'),
        ],
    }


def get_lexer() -> DirectiveLexer:
    """
    Get a DirectiveLexer instance

    Returns:
        DirectiveLexer instance ready for use with Pygments
    """
    return DirectiveLexer()
