"""
Command decoder for directive contents

Turns the raw text between '<' and '>' into a Command: the keyword is
resolved through the CodewordRegistry and, for custom directives, the
parameter block after ':' is parsed into up to six positional numbers.

Example:
    >>> command, errors = command_decode("wave : 5, 0, -5, 1, 0, .01")
    >>> command.codeword
    <Codeword.WAVE: 'wave'>
    >>> command.params.prev_frequency_y
    0.01
"""

import math
import re
from typing import List, Optional, Tuple

from ..models.errors import ErrorKind, MarkupError
from ..models.tokens import AnimationParams, Codeword, Command
from .codewords import CodewordRegistry

PARAM_SEPARATOR = ':'
FIELD_SEPARATOR = ','
MAX_FIELDS = len(AnimationParams.FIELDS)

_NUMBER = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')

_default_registry: Optional[CodewordRegistry] = None


def registry_default() -> CodewordRegistry:
    """Shared registry with the built-in codewords, created on first use"""
    global _default_registry
    if _default_registry is None:
        _default_registry = CodewordRegistry()
    return _default_registry


def number_parse(text: str) -> Optional[float]:
    """
    Parse one trimmed parameter field

    Returns:
        The value, or None if text is not a plain finite decimal number
    """
    if not _NUMBER.fullmatch(text):
        return None
    value = float(text)
    return value if math.isfinite(value) else None


def command_decode(
    raw: str, offset: int = 0, registry: Optional[CodewordRegistry] = None
) -> Tuple[Command, List[MarkupError]]:
    """
    Decode the inner text of one directive

    Only the first ':' separates keyword from parameters. Parameters are
    parsed for custom codewords only; native tags are opaque and always
    decode with every field unset. A block needs at least an amplitude and
    an x frequency; fields past the sixth are reported and dropped, and a
    field that is not a number is reported and left unset.

    Args:
        raw: Characters strictly between '<' and '>'
        offset: Source position of the directive's '<', used for error offsets
        registry: Codeword registry (shared default if omitted)

    Returns:
        (command, errors) - the command is always usable, even when errors
        were reported
    """
    registry = registry or registry_default()
    errors: List[MarkupError] = []

    keyword, separator, blob = raw.partition(PARAM_SEPARATOR)
    codeword = registry.lookup(keyword.strip())
    if codeword is None:
        return Command(codeword=Codeword.NATIVE), errors

    if not separator:
        return Command(codeword=codeword), errors

    # Absolute position of the first character of the parameter block
    base = offset + 1 + len(keyword) + 1
    fields = blob.split(FIELD_SEPARATOR)

    if len(fields) < 2:
        # An empty block points at the keyword, a lone amplitude at itself
        if blob.strip():
            error_offset = base + field_indent(blob)
        else:
            error_offset = offset + 1 + field_indent(keyword)
        errors.append(MarkupError(
            kind=ErrorKind.MALFORMED_PARAMETER,
            offset=error_offset,
            message=f"'{keyword.strip()}' amplitude requires at least an x frequency",
        ))
        return Command(codeword=codeword), errors

    if len(fields) > MAX_FIELDS:
        errors.append(MarkupError(
            kind=ErrorKind.TOO_MANY_PARAMETERS,
            offset=base + fieldStart_find(fields, MAX_FIELDS),
            message=f"'{keyword.strip()}' takes at most {MAX_FIELDS} parameters, got {len(fields)}",
        ))

    values: List[Optional[float]] = []
    for index, piece in enumerate(fields[:MAX_FIELDS]):
        text = piece.strip()
        value = number_parse(text)
        if value is None:
            errors.append(MarkupError(
                kind=ErrorKind.MALFORMED_PARAMETER,
                offset=base + fieldStart_find(fields, index),
                message=f"parameter {index + 1} of '{keyword.strip()}' is not a number: '{text}'",
            ))
        values.append(value)

    return Command(codeword=codeword, params=AnimationParams.positional_make(values)), errors


def field_indent(piece: str) -> int:
    """Offset of the first non-blank character of a field (0 if blank)"""
    stripped = piece.lstrip()
    return len(piece) - len(stripped) if stripped else 0


def fieldStart_find(fields: List[str], index: int) -> int:
    """Offset of field[index] within the joined parameter block"""
    start = sum(len(piece) + 1 for piece in fields[:index])
    return start + field_indent(fields[index])
