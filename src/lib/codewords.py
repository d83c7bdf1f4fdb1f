"""
Codeword registry for custom animation directives

Maps directive keywords to CodewordSpec records. A keyword with no entry
is not an error: it belongs to the host renderer's native vocabulary and
resolves to Codeword.NATIVE at decode time.
"""

from typing import Dict, List, Optional

from ..models.codewords import CodewordRole, CodewordSpec
from ..models.timeline import AnimationKind
from ..models.tokens import Codeword


class CodewordRegistry:
    """
    Registry of custom directive keywords

    Keywords are matched exactly and case-sensitively. Start and end specs
    are registered in pairs so the timeline compiler can ask which start a
    given end closes.
    """

    def __init__(self) -> None:
        """Initialize the registry and register the built-in animations"""
        self.specs: Dict[str, CodewordSpec] = {}
        self.byCodeword: Dict[Codeword, CodewordSpec] = {}
        self.animationCodewords_register()

    def register(self, spec: CodewordSpec) -> None:
        """
        Register a codeword specification under its keyword and aliases

        Raises:
            ValueError: If one of the keywords is already registered, a
                START spec names no animation kind, or an END spec does
                not close a registered START codeword
        """
        if spec.is_start and spec.kind is None:
            raise ValueError(f"Start codeword '{spec.keyword}' needs an animation kind")
        if spec.is_end:
            opener = self.byCodeword.get(spec.closes) if spec.closes is not None else None
            if opener is None or not opener.is_start:
                raise ValueError(
                    f"End codeword '{spec.keyword}' must close a registered start codeword"
                )
        for keyword in [spec.keyword, *spec.aliases]:
            if keyword in self.specs:
                raise ValueError(f"Codeword keyword already registered: '{keyword}'")
        for keyword in [spec.keyword, *spec.aliases]:
            self.specs[keyword] = spec
        self.byCodeword[spec.codeword] = spec

    def lookup(self, keyword: str) -> Optional[Codeword]:
        """
        Resolve a directive keyword

        Args:
            keyword: Keyword as written in the directive (trimmed by caller)

        Returns:
            Matching Codeword, or None when the keyword is not custom
        """
        spec = self.specs.get(keyword)
        return spec.codeword if spec is not None else None

    def spec_get(self, codeword: Codeword) -> Optional[CodewordSpec]:
        """Get full specification for a resolved codeword"""
        return self.byCodeword.get(codeword)

    def keywords_list(self) -> List[str]:
        """All registered keywords, aliases included"""
        return list(self.specs)

    def animationCodewords_register(self) -> None:
        """Register the wave and jitter start/end pairs"""

        self.register(CodewordSpec(
            keyword='wave',
            codeword=Codeword.WAVE,
            role=CodewordRole.START,
            kind=AnimationKind.WAVE,
            description='Start a sinusoidal wave over the following characters',
        ))

        self.register(CodewordSpec(
            keyword='/wave',
            codeword=Codeword.WAVE_END,
            role=CodewordRole.END,
            description='End the open wave region',
            closes=Codeword.WAVE,
            aliases=['wave-end'],
        ))

        self.register(CodewordSpec(
            keyword='jitter',
            codeword=Codeword.JITTER,
            role=CodewordRole.START,
            kind=AnimationKind.JITTER,
            description='Start random jitter over the following characters',
        ))

        self.register(CodewordSpec(
            keyword='/jitter',
            codeword=Codeword.JITTER_END,
            role=CodewordRole.END,
            description='End the open jitter region',
            closes=Codeword.JITTER,
            aliases=['jitter-end'],
        ))
