"""
Models package for textmotion

Contains data structures and type definitions for the compile pipeline.
"""

from .tokens import AnimationParams, Codeword, Command, Token, TokenKind
from .errors import ErrorKind, MarkupError
from .timeline import AnimationKind, AnimationRegion, CompileResult, RevealEvent
from .codewords import CodewordRole, CodewordSpec
from .state import CompileState, pipeline

__all__ = [
    "AnimationParams",
    "Codeword",
    "Command",
    "Token",
    "TokenKind",
    "ErrorKind",
    "MarkupError",
    "AnimationKind",
    "AnimationRegion",
    "CompileResult",
    "RevealEvent",
    "CodewordRole",
    "CodewordSpec",
    "CompileState",
    "pipeline",
]
