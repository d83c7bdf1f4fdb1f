"""
Diagnostic rendering

Formats MarkupError values with their surrounding source for developer
logging. Diagnostics never block compilation; this module only renders
and logs them.
"""

from typing import List, Sequence

from ..models.errors import MarkupError
from .log import LOG

CONTEXT_WIDTH = 40


def error_context(source: str, error: MarkupError, width: int = CONTEXT_WIDTH) -> str:
    """
    Render one error with source context

    Output includes:
    - The error message
    - Character offset
    - Source context (±width characters around the error)
    - Caret indicator pointing to the offending character

    Example output:
        unopened-tag at character 2: '>' without an opening '<'
        Context: ...ab>cd...
                      ^
    """
    context_start = max(0, error.offset - width)
    context_end = min(len(source), error.offset + width)
    context = source[context_start:context_end].replace("\n", " ")

    return (
        f"{error}\n"
        f"Context: ...{context}...\n"
        f"         {' ' * (3 + error.offset - context_start)}^"
    )


def errors_report(source: str, errors: Sequence[MarkupError]) -> List[str]:
    """
    Log every diagnostic at verbosity 1

    Returns:
        Rendered diagnostics, in the order given
    """
    rendered = [error_context(source, error) for error in errors]
    for text in rendered:
        LOG(text, level=1)
    if errors:
        LOG(f"{len(errors)} markup diagnostic(s)", level=2)
    return rendered
