"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, Dict, Callable
from dataclasses import dataclass, field
import dataclasses


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the rewrite pipeline (state bus pattern).

    Pipeline stages and their state additions:
        - Initial: inputFile, outputFile, baseDir, verbosity, listGenerators
        - env_check: inputSource, baseDirectory, envOK
        - source_read: sourceText
        - document_rewrite: rewriteResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputFile: Document to rewrite ("-" for stdin)
        outputFile: Destination of the rewritten document ("-" for stdout)
        baseDir: Directory for resolving paths named in directives
        verbosity: Logging verbosity level (0-3)
        listGenerators: Print the available commands instead of rewriting
        envOK: Environment validation passed
        inputSource: Resolved input path, None when reading stdin
        baseDirectory: Resolved base directory, None for the working directory
        sourceText: Full text of the input document
        rewriteResult: Rewrite counters (see RewriteStats)
    """

    # CLI arguments
    inputFile: str = field(default="-")
    outputFile: str = field(default="-")
    baseDir: Optional[str] = field(default=None)
    verbosity: int = field(default=0)
    listGenerators: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSource: Optional[Path] = field(default=None)
    baseDirectory: Optional[Path] = field(default=None)
    sourceText: Optional[str] = field(default=None)
    rewriteResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace
    ) -> "ProgramState":
        """
        Create ProgramState from an argparse Namespace.

        Options without a matching field are ignored.

        Args:
            options: Parsed CLI arguments

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}
        return cls(**filtered_options)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_read,
            document_rewrite,
            results_report
        )
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
