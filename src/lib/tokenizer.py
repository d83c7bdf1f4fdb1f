"""
Markup tokenizer

Splits a rich-text string into text runs and '<...>' directives with a
character-by-character state machine.

States:
    PLAIN            collecting text
    TAG_OPEN         collecting a command after '<'
    TAG_JUST_CLOSED  a '>' was just consumed

The tokenizer is error tolerant: a '<' inside an open tag or a '>' with
no open tag is recorded as a MarkupError and the character is kept, so
every input character ends up in exactly one token.

Example:
    >>> tokens, errors = Tokenizer("Hi<size=200%>there").tokenize()
    >>> [(t.kind.value, t.content) for t in tokens]
    [('text', 'Hi'), ('directive', 'size=200%'), ('text', 'there')]
"""

from enum import Enum
from typing import List, Optional, Tuple

from ..models.errors import ErrorKind, MarkupError
from ..models.tokens import Token, TokenKind
from .codewords import CodewordRegistry
from .decoder import command_decode, registry_default

TAG_OPEN = '<'
TAG_CLOSE = '>'


class LexState(Enum):
    """Tokenizer states"""
    PLAIN = "plain"
    TAG_OPEN = "tag-open"
    TAG_JUST_CLOSED = "tag-just-closed"


class Tokenizer:
    """
    Tokenizer for inline '<directive>' markup

    Handles:
    - Native host tags (<b>, <size=200%>) passed through as NATIVE directives
    - Custom animation directives with parameters (<wave: 1, 2>)
    - Unclosed and unopened brackets, reported without aborting
    - Unterminated tags at end of input, emitted best-effort
    """

    def __init__(self, source: str, registry: Optional[CodewordRegistry] = None):
        """
        Initialize tokenizer with source text

        Args:
            source: Raw markup
            registry: Optional CodewordRegistry for resolving directive keywords

        Attributes:
            source: Source text being tokenized
            state: Current lexing state
            position: Current character position in source
            tokens: Emitted tokens, in source order
            errors: Structural and decode errors, in discovery order
        """
        self.source = source
        self.registry = registry or registry_default()
        self.state = LexState.PLAIN
        self.position = 0
        self.tokens: List[Token] = []
        self.errors: List[MarkupError] = []
        self._text: List[str] = []
        self._textStart = 0
        self._command: List[str] = []
        self._commandStart = 0

    def tokenize(self) -> Tuple[List[Token], List[MarkupError]]:
        """
        Scan the whole source in one pass

        Never raises. Calling it again rescans from scratch.

        Returns:
            (tokens, errors)
        """
        self.state_reset()

        for self.position, char in enumerate(self.source):
            if self.state is LexState.TAG_OPEN:
                self.tagOpen_consume(char)
            else:
                self.plain_consume(char)

        self.input_finish()
        return self.tokens, self.errors

    def state_reset(self) -> None:
        self.state = LexState.PLAIN
        self.position = 0
        self.tokens = []
        self.errors = []
        self._text = []
        self._command = []

    def plain_consume(self, char: str) -> None:
        """Handle one character in PLAIN or TAG_JUST_CLOSED"""
        if char == TAG_OPEN:
            self.text_flush()
            self.command_open()
            return

        if char == TAG_CLOSE:
            self.error_record(
                ErrorKind.UNOPENED_TAG, self.position, "'>' without an opening '<'"
            )

        self.state = LexState.PLAIN
        if not self._text:
            self._textStart = self.position
        self._text.append(char)

    def tagOpen_consume(self, char: str) -> None:
        """Handle one character inside an open tag"""
        if char == TAG_CLOSE:
            self.command_close()
            return

        if char == TAG_OPEN:
            self.error_record(
                ErrorKind.UNCLOSED_TAG,
                self.position,
                f"'<' inside the tag opened at character {self._commandStart}; close it with '>' first",
            )
        self._command.append(char)

    def command_open(self) -> None:
        self.state = LexState.TAG_OPEN
        self._command = []
        self._commandStart = self.position

    def command_close(self, closed: bool = True) -> None:
        """Decode the buffered command and emit it as a directive token"""
        raw = ''.join(self._command)
        command, decode_errors = command_decode(raw, self._commandStart, self.registry)
        self.errors.extend(decode_errors)

        self.tokens.append(Token(
            kind=TokenKind.DIRECTIVE,
            content=raw,
            offset=self._commandStart,
            codeword=command.codeword,
            params=command.params,
            closed=closed,
        ))
        self._command = []
        self.state = LexState.TAG_JUST_CLOSED

    def text_flush(self) -> None:
        """Emit buffered text as a TEXT token (nothing if the buffer is empty)"""
        if not self._text:
            return
        self.tokens.append(Token(
            kind=TokenKind.TEXT, content=''.join(self._text), offset=self._textStart
        ))
        self._text = []

    def input_finish(self) -> None:
        """Flush whatever is pending at end of input"""
        if self.state is LexState.TAG_OPEN:
            self.error_record(
                ErrorKind.UNCLOSED_TAG,
                self._commandStart,
                "tag is never closed before the end of input",
            )
            self.command_close(closed=False)
        self.text_flush()

    def error_record(self, kind: ErrorKind, offset: int, message: str) -> None:
        self.errors.append(MarkupError(kind=kind, offset=offset, message=message))


def markup_tokenize(
    source: str, registry: Optional[CodewordRegistry] = None
) -> Tuple[List[Token], List[MarkupError]]:
    """Tokenize source in one call; see Tokenizer"""
    return Tokenizer(source, registry).tokenize()
