"""
Library logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the current
CompileState's verbosity level without requiring explicit state passing.

textmotion is embedded in a host application, so importing it never
touches loguru's handlers. Records are emitted under the "textmotion"
name, which is disabled until the host opts in.

Usage:
    from textmotion.lib.log import log_enable, sink_add

    log_enable()        # route records to the host's existing sinks
    sink_add()          # or also add a formatted stderr sink

Inside the library:
    state_connectToLogger(state)
    LOG("Diagnostics appear if verbosity >= 1", level=1)
    LOG("Stage progress appears if verbosity >= 2", level=2)
    LOG("Token traces appear if verbosity >= 3", level=3)
"""

from loguru import logger
from typing import Any, Optional, TextIO
from contextvars import ContextVar
import sys

LOGGER_NAME = "textmotion"

# Context variable to hold current CompileState
_compile_state: ContextVar[Optional[Any]] = ContextVar('compile_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.disable(LOGGER_NAME)


def log_enable() -> None:
    """Let textmotion records reach the host's loguru sinks"""
    logger.enable(LOGGER_NAME)


def log_disable() -> None:
    """Silence textmotion records again"""
    logger.disable(LOGGER_NAME)


def sink_add(sink: TextIO = sys.stderr, level: str = "DEBUG") -> int:
    """
    Enable textmotion logging and add a sink showing only its records

    Returns:
        Loguru handler id, for logger.remove()
    """
    log_enable()
    return logger.add(
        sink,
        format=logger_format,
        level=level,
        filter=LOGGER_NAME,
    )


def state_connectToLogger(state: Any) -> None:
    """
    Connect a CompileState to the logging context.

    Call this at the start of a compile to make the state's verbosity
    setting available to LOG() calls throughout that context.

    Args:
        state: CompileState instance with verbosity attribute
    """
    _compile_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    The record is attributed to the calling module, so it carries a
    textmotion.* name and follows log_enable()/log_disable().

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=diagnostics, 2=stages, 3=trace)
        **kwargs: Additional loguru metadata
    """
    state = _compile_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)
