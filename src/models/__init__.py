"""
Models package for mdautogen

Contains data structures and type definitions for the rewrite pipeline.
"""

from .state import ProgramState, pipeline
from .directives import Directive, GeneratorSpec
from .rewriter import Mode, RewriteStats

__all__ = [
    "ProgramState",
    "pipeline",
    "Directive",
    "GeneratorSpec",
    "Mode",
    "RewriteStats",
]
