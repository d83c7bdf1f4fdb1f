"""
Host-facing animator

TextAnimator ties the pieces together for a rendering collaborator:
display() compiles new markup and restarts the reveal, update() is called
once per frame, and vertex_displace() is sampled per character vertex.
"""

from typing import Callable, Optional

from ..config import AnimatorSettings, appsettings
from ..models.timeline import CompileResult
from .animation import Vertex, vertex_displace
from .codewords import CodewordRegistry
from .compiler import markup_compile
from .scheduler import RevealPlayer


class TextAnimator:
    """
    Compiles markup for one text target and drives its animation

    Responsibilities:
    - Replace the compiled snapshot wholesale on each display()
    - Keep a single reveal schedule per target
    - Expose clean text, timeline and visible character count to the renderer
    """

    def __init__(
        self,
        settings: Optional[AnimatorSettings] = None,
        registry: Optional[CodewordRegistry] = None,
    ) -> None:
        self.settings = settings or appsettings
        self.registry = registry
        self.player = RevealPlayer(self.settings)
        self.result: Optional[CompileResult] = None

    def display(self, source: str) -> CompileResult:
        """
        Compile source and start revealing it

        The previous snapshot and any in-flight reveal are discarded.
        """
        result = markup_compile(source, self.settings, self.registry)
        self.player.cancel()
        self.result = result
        self.player.start(result)
        return result

    def update(self, elapsed: float) -> int:
        """Advance the reveal by one frame; returns characters revealed"""
        return self.player.update(elapsed)

    @property
    def cleanText(self) -> str:
        return self.result.cleanText if self.result else ""

    @property
    def maxVisibleCharacters(self) -> int:
        return self.player.maxVisibleCharacters

    def vertex_displace(
        self,
        index: int,
        time: float,
        vertex: Vertex,
        rand: Optional[Callable[[], float]] = None,
    ) -> Vertex:
        """Displace a vertex of the character at a visible index"""
        if self.result is None:
            return vertex
        return vertex_displace(self.result.timeline, index, time, vertex, rand)
