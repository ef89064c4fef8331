"""
Exception classes raised while rewriting a document.
"""


class MdautogenError(Exception):
    pass


class DirectiveParseError(MdautogenError):
    """Begin-marker payload is not a well-formed directive call."""


class UnknownDirectiveError(MdautogenError):
    """Directive names a command that is not in the generator registry."""

    def __init__(self, name: str):
        super().__init__(f"Unknown directive '{name}'")
        self.name = name


class FileReadError(MdautogenError):
    """A file referenced by a directive could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(reason)
        self.path = path
        self.reason = reason
