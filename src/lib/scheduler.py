"""
Typewriter reveal scheduling

reveal_schedule() turns processed tokens into a lazy stream of
RevealEvents. RevealPlayer steps such a stream from a host frame or timer
loop and keeps the "max visible characters" counter the renderer reads.
"""

from typing import Iterable, Iterator, Optional

from ..config import AnimatorSettings, appsettings
from ..models.timeline import CompileResult, RevealEvent
from ..models.tokens import Token, TokenKind
from .log import LOG


def reveal_schedule(
    tokens: Iterable[Token], settings: Optional[AnimatorSettings] = None
) -> Iterator[RevealEvent]:
    """
    Generate one reveal event per visible character

    - TEXT: one event per character, waiting letter_wait
    - PAUSE: one event for the pause character, waiting pause_wait
    - DIRECTIVE: one empty event with zero wait (ordering only), except an
      unterminated native tag, whose text is revealed like TEXT

    Each call returns a fresh generator; a stream cannot be resumed once
    discarded.

    Args:
        tokens: Processed tokens (pause split already applied)
        settings: AnimatorSettings providing the waits
    """
    settings = settings or appsettings
    for token in tokens:
        if token.kind is TokenKind.TEXT:
            for char in token.content:
                yield RevealEvent(char=char, wait_seconds=settings.letter_wait)
        elif token.kind is TokenKind.PAUSE:
            yield RevealEvent(char=token.content, wait_seconds=settings.pause_wait)
        elif token.is_native and not token.closed:
            for char in token.markup():
                yield RevealEvent(char=char, wait_seconds=settings.letter_wait)
        else:
            yield RevealEvent(char="", wait_seconds=0.0)


class RevealPlayer:
    """
    Steps a reveal schedule from a host loop

    At most one schedule is active. Starting a new one discards the
    suspended state of the previous one.

    Example:
        player = RevealPlayer(settings)
        player.start(result)
        while player.active:
            player.update(frame_seconds)
            renderer.max_visible = player.maxVisibleCharacters
    """

    def __init__(self, settings: Optional[AnimatorSettings] = None) -> None:
        self.settings = settings or appsettings
        self.maxVisibleCharacters = 0
        self._events: Optional[Iterator[RevealEvent]] = None
        self._waitRemaining = 0.0

    @property
    def active(self) -> bool:
        return self._events is not None

    def start(self, result: CompileResult) -> None:
        """
        Begin revealing a compiled result

        With the typewriter disabled every visible character is shown at
        once and no schedule runs.
        """
        self.cancel()
        self._waitRemaining = 0.0

        if not self.settings.typewriter_enabled:
            self.maxVisibleCharacters = result.visibleCount
            return

        self.maxVisibleCharacters = 0
        self._events = reveal_schedule(result.processedTokens, self.settings)
        LOG(f"Reveal started for {result.visibleCount} characters", level=2)

    def cancel(self) -> None:
        """Discard the running schedule, keeping the current counter"""
        if self._events is not None:
            self._events.close()
            self._events = None
            LOG("Reveal cancelled", level=2)

    def update(self, elapsed: float) -> int:
        """
        Advance the schedule by elapsed seconds

        Fires every event whose turn has come; the first event of a new
        schedule fires on the first update, even update(0).

        Returns:
            Number of characters revealed by this call
        """
        if self._events is None:
            return 0

        revealed = 0
        self._waitRemaining -= elapsed
        while self._waitRemaining <= 0:
            event = next(self._events, None)
            if event is None:
                self._events = None
                self._waitRemaining = 0.0
                LOG(f"Reveal finished at {self.maxVisibleCharacters} characters", level=2)
                break
            if event.visible:
                self.maxVisibleCharacters += 1
                revealed += 1
            self._waitRemaining += event.wait_seconds
        return revealed
