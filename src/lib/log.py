"""
Centralized logging using Loguru with context-aware verbosity.

mdautogen writes the rewritten document to stdout, so every diagnostic goes
to stderr through loguru and only when the bound ProgramState asks for it.

Usage:
    from mdautogen.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)

    LOG("Rewriting document", level=1)            # -v
    LOG("Begin marker on line 12", level=2)       # -vv
    LOG("Directive tokens: [...]", level=3)       # -vvv
"""

from loguru import logger
from typing import Any, Dict, Optional
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

# Loguru severity used for each verbosity level
_level_names: Dict[int, str] = {
    1: "INFO",
    2: "DEBUG",
    3: "TRACE",
}

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{module: <10}</cyan>:<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="TRACE")


def state_connectToLogger(state: Any) -> None:
    """
    Bind a ProgramState to the logging context.

    Args:
        state: ProgramState instance with a verbosity attribute
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=-v, 2=-vv, 3=-vvv)
        **kwargs: Additional loguru arguments

    Nothing is logged when no state has been bound, which is the case when
    mdautogen is used as a library.
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).log(_level_names.get(level, "TRACE"), message, **kwargs)
