"""
mdautogen - Auto-generate marker-delimited regions of Markdown documents
"""

__version__ = "1.0.0"

from .rewriter import Rewriter, text_rewrite
from .generators import GeneratorRegistry
from .parser import DirectiveParser, directive_parse
from .exceptions import MdautogenError, DirectiveParseError, UnknownDirectiveError, FileReadError
from .log import LOG, state_connectToLogger

__all__ = [
    "Rewriter",
    "text_rewrite",
    "GeneratorRegistry",
    "DirectiveParser",
    "directive_parse",
    "MdautogenError",
    "DirectiveParseError",
    "UnknownDirectiveError",
    "FileReadError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
