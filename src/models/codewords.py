"""
Codeword specification models

Describes how each custom directive keyword pairs up with the others:
whether it opens or closes a region and which animation it belongs to.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional

from .tokens import Codeword
from .timeline import AnimationKind


class CodewordRole(Enum):
    """Whether a custom directive opens or closes an animation region"""
    START = "start"
    END = "end"


@dataclass
class CodewordSpec:
    """
    Specification of one custom directive keyword

    Attributes:
        keyword: Canonical keyword as written between the brackets
        codeword: Resolved codeword enumeration member
        role: START opens a region, END closes one
        kind: For START specs, the animation kind of the region opened
        description: Human-readable description
        closes: For END specs, the START codeword being closed
        aliases: Alternative keywords resolving to the same codeword
    """
    keyword: str
    codeword: Codeword
    role: CodewordRole
    kind: Optional[AnimationKind] = None
    description: str = ""
    closes: Optional[Codeword] = None
    aliases: List[str] = field(default_factory=list)

    def matches(self, keyword: str) -> bool:
        """Exact, case-sensitive match against the keyword or an alias"""
        return keyword == self.keyword or keyword in self.aliases

    @property
    def is_start(self) -> bool:
        return self.role is CodewordRole.START

    @property
    def is_end(self) -> bool:
        return self.role is CodewordRole.END
