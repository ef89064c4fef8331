"""
mdautogen - Auto-generate marker-delimited regions of Markdown documents

Pipe a Markdown file through mdautogen and every region between
<!-- BEGIN_MDAUTOGEN: ... --> and <!-- END_MDAUTOGEN --> is regenerated
from the files its directive names.
"""

__version__ = "1.0.0"

from .lib import (
    Rewriter,
    text_rewrite,
    GeneratorRegistry,
    DirectiveParseError,
    UnknownDirectiveError,
    FileReadError,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "Rewriter",
    "text_rewrite",
    "GeneratorRegistry",
    "DirectiveParseError",
    "UnknownDirectiveError",
    "FileReadError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
