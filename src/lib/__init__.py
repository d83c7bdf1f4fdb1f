"""
textmotion - Animated rich-text markup compiler

Compiles inline '<directive>' markup into display text, an animation
timeline and a typewriter reveal schedule.
"""

from .codewords import CodewordRegistry
from .tokenizer import Tokenizer
from .decoder import command_decode
from .compiler import TimelineCompiler, markup_compile
from .scheduler import RevealPlayer, reveal_schedule
from .animator import TextAnimator
from .log import LOG, log_disable, log_enable, sink_add, state_connectToLogger

__all__ = [
    "CodewordRegistry",
    "Tokenizer",
    "command_decode",
    "TimelineCompiler",
    "markup_compile",
    "RevealPlayer",
    "reveal_schedule",
    "TextAnimator",
    "LOG",
    "log_enable",
    "log_disable",
    "sink_add",
    "state_connectToLogger",
]
