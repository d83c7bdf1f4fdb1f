"""
Diagnostic records for markup compilation

Every problem found while tokenizing, decoding or compiling markup is
recorded as a MarkupError value. Nothing here is ever raised: errors are
accumulated next to the best-effort output and handed to the caller for
logging.
"""

from enum import Enum
from dataclasses import dataclass


class ErrorKind(Enum):
    """
    Categories of markup diagnostics

    Structural kinds come from the tokenizer, parameter kinds from the
    command decoder, and region mismatches from the timeline compiler.
    """
    UNCLOSED_TAG = "unclosed-tag"              # '<' before the matching '>'
    UNOPENED_TAG = "unopened-tag"              # '>' with no '<'
    MALFORMED_PARAMETER = "malformed-parameter"
    TOO_MANY_PARAMETERS = "too-many-parameters"
    REGION_MISMATCH = "region-mismatch"        # start/end directives do not pair


@dataclass(frozen=True)
class MarkupError:
    """
    A single non-fatal diagnostic

    Attributes:
        kind: Error category
        offset: Character offset into the source string
        message: Human-readable description
    """
    kind: ErrorKind
    offset: int
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value} at character {self.offset}: {self.message}"
