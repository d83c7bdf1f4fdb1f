"""
Token and command models

Tokens are produced by the markup tokenizer and refined by the pause
splitter. Commands are what the decoder makes of the text between '<'
and '>'.
"""

from enum import Enum
from dataclasses import dataclass, field, replace
from typing import Optional


class TokenKind(Enum):
    """Lexical category of a token"""
    TEXT = "text"
    DIRECTIVE = "directive"
    PAUSE = "pause"


class Codeword(Enum):
    """
    Resolved identity of a directive keyword

    NATIVE marks a tag that belongs to the host renderer and is passed
    through untouched. The remaining members are the custom animation
    directives, paired as start/end markers.
    """
    NONE = "none"
    NATIVE = "native"
    WAVE = "wave"
    WAVE_END = "/wave"
    JITTER = "jitter"
    JITTER_END = "/jitter"


@dataclass(frozen=True)
class AnimationParams:
    """
    Six positional animation parameters

    Fields follow the order they are written in a directive
    (``<wave: currAmp, currFreqX, currFreqY, prevAmp, prevFreqX, prevFreqY>``).
    None means "unset" and is replaced by a configured default when a
    region is built; zero is a real value.
    """
    curr_amplitude: Optional[float] = None
    curr_frequency_x: Optional[float] = None
    curr_frequency_y: Optional[float] = None
    prev_amplitude: Optional[float] = None
    prev_frequency_x: Optional[float] = None
    prev_frequency_y: Optional[float] = None

    FIELDS = (
        "curr_amplitude",
        "curr_frequency_x",
        "curr_frequency_y",
        "prev_amplitude",
        "prev_frequency_x",
        "prev_frequency_y",
    )

    @classmethod
    def positional_make(cls, values: list[Optional[float]]) -> "AnimationParams":
        """Build params from up to six values in directive order"""
        return cls(**dict(zip(cls.FIELDS, values)))

    def defaults_apply(self, defaults: "AnimationParams") -> "AnimationParams":
        """
        Substitute every unset field with the matching field of defaults

        Returns a new AnimationParams; self is left unchanged.
        """
        merged = {}
        for name in self.FIELDS:
            value = getattr(self, name)
            merged[name] = value if value is not None else getattr(defaults, name)
        return type(self)(**merged)

    def is_unset(self) -> bool:
        return all(getattr(self, name) is None for name in self.FIELDS)


@dataclass(frozen=True)
class Command:
    """Decoded directive: resolved codeword plus its parameters"""
    codeword: Codeword
    params: AnimationParams = field(default_factory=AnimationParams)


@dataclass(frozen=True)
class Token:
    """
    One lexical unit of markup

    Attributes:
        kind: Text, Directive or Pause
        content: Literal text (Text/Pause) or the raw command between the
                 brackets (Directive)
        offset: Position in the source where the token starts (for a
                directive, the position of its '<')
        codeword: Resolved codeword, meaningful for directives only
        params: Decoded parameters, meaningful for custom directives only
        closed: False for a directive cut off by the end of input

    Example:
        "Hi<size=200%>" tokenizes to
        Token(TEXT, "Hi", 0) and Token(DIRECTIVE, "size=200%", 2, Codeword.NATIVE)
    """
    kind: TokenKind
    content: str
    offset: int = 0
    codeword: Codeword = Codeword.NONE
    params: AnimationParams = field(default_factory=AnimationParams)
    closed: bool = True

    @property
    def span(self) -> int:
        """Number of source characters this token was built from"""
        if self.kind is TokenKind.DIRECTIVE:
            return len(self.content) + (2 if self.closed else 1)
        return len(self.content)

    @property
    def is_directive(self) -> bool:
        return self.kind is TokenKind.DIRECTIVE

    @property
    def is_native(self) -> bool:
        return self.kind is TokenKind.DIRECTIVE and self.codeword is Codeword.NATIVE

    def markup(self) -> str:
        """Re-emit a directive with its brackets (a missing '>' stays missing)"""
        return "<" + self.content + (">" if self.closed else "")

    def derive(self, **changes) -> "Token":
        """Copy this token with some fields replaced"""
        return replace(self, **changes)
