"""
textmotion - Animated rich-text markup compiler

Turns text with inline host tags and custom animation directives into a
clean display string, a per-character animation timeline and a timed
typewriter reveal.
"""

__version__ = "1.0.0"

from .lib import (
    CodewordRegistry,
    TextAnimator,
    Tokenizer,
    markup_compile,
    reveal_schedule,
    LOG,
    log_enable,
    log_disable,
    sink_add,
    state_connectToLogger,
)
from .config import AnimatorSettings, appsettings

__all__ = [
    "CodewordRegistry",
    "TextAnimator",
    "Tokenizer",
    "markup_compile",
    "reveal_schedule",
    "AnimatorSettings",
    "appsettings",
    "LOG",
    "log_enable",
    "log_disable",
    "sink_add",
    "state_connectToLogger",
    "__version__",
]
