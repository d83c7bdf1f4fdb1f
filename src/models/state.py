"""
Compile state model and pipeline helper

Defines CompileState, the dataclass carried through the compile stages,
and the pipeline() helper for composing them.
"""

from typing import Any, Callable, List, Optional, TypeVar
from dataclasses import dataclass, field

from .tokens import Token
from .errors import MarkupError
from .timeline import AnimationRegion


CS = TypeVar("CS", bound="CompileState")


@dataclass
class CompileState:
    """
    State container for one markup compile (state bus pattern).

    Each stage receives a state, copies it, and assigns fresh values for
    the fields it produces. Lists are replaced, never appended to, so an
    earlier state is never altered by a later stage.

    Pipeline stages and their state additions:
        - source_tokenize: tokens, errors
        - pauses_split: processedTokens
        - timeline_compile: cleanText, timeline, visibleCount, errors

    Attributes:
        source: Raw markup being compiled
        verbosity: Logging verbosity level (0-3)
        settings: AnimatorSettings used for defaults and the pause character
        registry: CodewordRegistry used to resolve directive keywords
        tokens: Tokenizer output
        processedTokens: Tokens after pause splitting
        cleanText: Display string
        timeline: Compiled animation regions
        visibleCount: Number of visible characters in cleanText
        errors: Accumulated diagnostics
    """

    source: str = field(default="")
    verbosity: int = field(default=1)
    settings: Optional[Any] = field(default=None)
    registry: Optional[Any] = field(default=None)

    tokens: List[Token] = field(default_factory=list)
    processedTokens: List[Token] = field(default_factory=list)
    cleanText: str = field(default="")
    timeline: List[AnimationRegion] = field(default_factory=list)
    visibleCount: int = field(default=0)
    errors: List[MarkupError] = field(default_factory=list)

    def copy(self: CS) -> CS:
        """
        Creates a shallow copy of the CompileState instance.

        Returns:
            A new CompileState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: CompileState, *stages: Callable[[CompileState], CompileState]
) -> CompileState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (CompileState) -> CompileState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(state, source_tokenize, pauses_split, timeline_compile)

    This is equivalent to:
        timeline_compile(pauses_split(source_tokenize(state)))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
