"""
Compiled output models

Animation regions, reveal events and the compile result snapshot handed
to the rendering collaborator.
"""

from enum import Enum
from dataclasses import dataclass

from .tokens import AnimationParams, Token
from .errors import MarkupError


class AnimationKind(Enum):
    """Per-character displacement treatments"""
    WAVE = "wave"
    JITTER = "jitter"


@dataclass(frozen=True)
class AnimationRegion:
    """
    A range of visible characters under one animation

    Indices count visible characters of the clean string only; native tag
    markup is not counted, except an unterminated tag at the end of input,
    which the renderer shows as plain text. The range is half-open: start_index is the first
    animated character and end_index is one past the last.

    Attributes:
        kind: Animation treatment
        start_index: First animated character
        end_index: One past the last animated character
        params: Fully resolved parameters (no unset fields)
    """
    kind: AnimationKind
    start_index: int
    end_index: int
    params: AnimationParams

    def __contains__(self, index: int) -> bool:
        return self.start_index <= index < self.end_index

    def __len__(self) -> int:
        return self.end_index - self.start_index


@dataclass(frozen=True)
class RevealEvent:
    """
    One step of the typewriter reveal

    Attributes:
        char: Character revealed by this step; empty for a directive yield
        wait_seconds: How long to wait after this step before the next
    """
    char: str
    wait_seconds: float

    @property
    def visible(self) -> bool:
        return bool(self.char)


@dataclass(frozen=True)
class CompileResult:
    """
    Immutable snapshot produced by one compile

    Attributes:
        cleanText: Display string with custom directives stripped and native
                   tags kept
        timeline: Animation regions over visible character indices
        errors: Diagnostics collected during the compile
        tokens: Raw tokenizer output
        processedTokens: Tokens after pause splitting, fed to the scheduler
        visibleCount: Number of visible characters in cleanText
    """
    cleanText: str
    timeline: tuple[AnimationRegion, ...]
    errors: tuple[MarkupError, ...]
    tokens: tuple[Token, ...]
    processedTokens: tuple[Token, ...]
    visibleCount: int
