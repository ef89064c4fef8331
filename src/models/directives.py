"""
Directive and generator specification models

Defines the parsed form of a begin-marker directive and the metadata the
GeneratorRegistry keeps for each command it can dispatch.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Tuple


@dataclass
class Directive:
    """
    A command call parsed from a begin marker

    Attributes:
        name: Command name (e.g., "code_table")
        args: Unquoted string arguments, in call order

    Example:
        For marker "<!-- BEGIN_MDAUTOGEN: code_table('a.js', 'b.hpp') -->":
        Directive(name="code_table", args=["a.js", "b.hpp"])
    """
    name: str
    args: List[str] = field(default_factory=list)


@dataclass
class GeneratorSpec:
    """
    Specification for a generator command

    Attributes:
        name: Command name used in directives
        description: Human-readable description
        handler: Rendering function (args) -> str
        arities: Argument counts the command accepts
        examples: Example directive strings
        aliases: Alternative names for the command
    """
    name: str
    description: str
    handler: Callable[[List[str]], str]
    arities: Tuple[int, ...] = ()
    examples: List[str] = field(default_factory=list)
    aliases: List[str] = field(default_factory=list)

    def arity_accepts(self, count: int) -> bool:
        """Check an argument count against the declared arities (empty means any)"""
        return not self.arities or count in self.arities
