"""
Pause splitter, timeline compiler and compile entry point

Consumes tokenizer output and produces the CompileResult snapshot:

    source --tokenize--> tokens --split pauses--> processed tokens
           --compile--> (clean text, animation timeline, diagnostics)

Each stage is a function (CompileState) -> CompileState composed with
pipeline(), mirroring how the stages are run in markup_compile().
"""

from typing import Dict, List, Optional, Tuple

from ..config import AnimatorSettings, appsettings
from ..models.errors import ErrorKind, MarkupError
from ..models.state import CompileState, pipeline
from ..models.timeline import AnimationKind, AnimationRegion, CompileResult
from ..models.tokens import AnimationParams, Token, TokenKind
from .codewords import CodewordRegistry
from .decoder import registry_default
from .diagnostics import errors_report
from .lexer import source_highlight
from .log import LOG, state_connectToLogger
from .tokenizer import Tokenizer


def textToken_split(token: Token, pause_char: str) -> List[Token]:
    """
    Split one TEXT token around its pause characters

    Every pause character becomes its own PAUSE token; runs are not
    collapsed. Text between pauses, whitespace included, stays TEXT. The
    token's codeword and params are carried onto every piece.

    Example:
        "a...b" -> [TEXT "a", PAUSE ".", PAUSE ".", PAUSE ".", TEXT "b"]
    """
    pieces: List[Token] = []
    position = token.offset
    segments = token.content.split(pause_char)

    for index, segment in enumerate(segments):
        if segment:
            pieces.append(token.derive(kind=TokenKind.TEXT, content=segment, offset=position))
            position += len(segment)
        if index < len(segments) - 1:
            pieces.append(token.derive(kind=TokenKind.PAUSE, content=pause_char, offset=position))
            position += len(pause_char)

    return pieces


def tokens_splitPauses(tokens: List[Token], pause_char: str = ".") -> List[Token]:
    """Split every TEXT token on pause_char, keeping token order"""
    processed: List[Token] = []
    for token in tokens:
        if token.kind is TokenKind.TEXT and pause_char in token.content:
            processed.extend(textToken_split(token, pause_char))
        else:
            processed.append(token)
    return processed


class TimelineCompiler:
    """
    Builds the clean string and animation timeline from processed tokens

    Walks tokens once, keeping a visible-character counter. Start
    directives open a pending region keyed by animation kind; an end
    directive closes the region of the start codeword its spec names, at
    the current counter. Pending regions live only in this compiler's
    local state.
    """

    def __init__(
        self,
        tokens: List[Token],
        defaults: Optional[AnimationParams] = None,
        registry: Optional[CodewordRegistry] = None,
    ) -> None:
        """
        Args:
            tokens: Processed tokens (pause split already applied)
            defaults: Values substituted for unset directive parameters
            registry: CodewordRegistry describing start/end pairing
        """
        self.tokens = tokens
        self.defaults = defaults or appsettings.defaults_get()
        self.registry = registry or registry_default()

    def compile(self) -> Tuple[str, List[AnimationRegion], int, List[MarkupError]]:
        """
        Returns:
            (clean_text, timeline, visible_count, errors)
        """
        parts: List[str] = []
        timeline: List[AnimationRegion] = []
        errors: List[MarkupError] = []
        pending: Dict[AnimationKind, Tuple[Token, int, AnimationParams]] = {}
        counter = 0

        for token in self.tokens:
            if token.kind is not TokenKind.DIRECTIVE:
                parts.append(token.content)
                counter += len(token.content)
                continue

            if token.is_native:
                parts.append(token.markup())
                # An unterminated tag never reaches the renderer as markup
                if not token.closed:
                    counter += len(token.markup())
                continue

            spec = self.registry.spec_get(token.codeword)
            if spec is None:
                continue

            if spec.is_start:
                if spec.kind in pending:
                    opener = pending[spec.kind][0]
                    errors.append(MarkupError(
                        kind=ErrorKind.REGION_MISMATCH,
                        offset=token.offset,
                        message=(
                            f"'<{token.content}>' opens a {spec.kind.value} region while the one "
                            f"opened at character {opener.offset} is still open; ignored"
                        ),
                    ))
                    continue
                params = token.params.defaults_apply(self.defaults)
                pending[spec.kind] = (token, counter, params)
                LOG(f"Opened {spec.kind.value} region at index {counter}", level=3)
                continue

            kind = self.registry.spec_get(spec.closes).kind
            if kind not in pending:
                errors.append(MarkupError(
                    kind=ErrorKind.REGION_MISMATCH,
                    offset=token.offset,
                    message=f"'<{token.content}>' closes a {kind.value} region that was never opened; ignored",
                ))
                continue

            _, start, params = pending.pop(kind)
            timeline.append(AnimationRegion(
                kind=kind, start_index=start, end_index=counter, params=params
            ))
            LOG(f"Closed {kind.value} region [{start}, {counter})", level=3)

        for kind, (opener, _, _) in pending.items():
            errors.append(MarkupError(
                kind=ErrorKind.REGION_MISMATCH,
                offset=opener.offset,
                message=f"'<{opener.content}>' opens a {kind.value} region that is never closed; dropped",
            ))

        errors.sort(key=lambda error: error.offset)
        return ''.join(parts), timeline, counter, errors


def source_tokenize(inputstate: CompileState) -> CompileState:
    """Pipeline stage: tokenize state.source"""
    state = inputstate.copy()
    tokens, errors = Tokenizer(state.source, state.registry).tokenize()
    state.tokens = tokens
    state.errors = state.errors + errors
    LOG(f"Tokenized {len(state.source)} characters into {len(tokens)} tokens", level=2)
    return state


def pauses_split(inputstate: CompileState) -> CompileState:
    """Pipeline stage: split TEXT tokens on the configured pause character"""
    state = inputstate.copy()
    pause_char = state.settings.pause_char if state.settings else appsettings.pause_char
    state.processedTokens = tokens_splitPauses(state.tokens, pause_char)
    LOG(f"Pause splitting produced {len(state.processedTokens)} tokens", level=2)
    return state


def timeline_compile(inputstate: CompileState) -> CompileState:
    """Pipeline stage: assemble clean text and animation timeline"""
    state = inputstate.copy()
    settings = state.settings or appsettings
    compiler = TimelineCompiler(state.processedTokens, settings.defaults_get(), state.registry)
    clean_text, timeline, visible_count, errors = compiler.compile()
    state.cleanText = clean_text
    state.timeline = timeline
    state.visibleCount = visible_count
    state.errors = state.errors + errors
    LOG(f"Compiled {len(timeline)} animation regions over {visible_count} visible characters", level=2)
    return state


def markup_compile(
    source: str,
    settings: Optional[AnimatorSettings] = None,
    registry: Optional[CodewordRegistry] = None,
) -> CompileResult:
    """
    Compile markup into a CompileResult snapshot

    Never raises for malformed markup: diagnostics are returned in
    result.errors and logged at verbosity 1.

    Args:
        source: Markup with native tags and custom directives
        settings: AnimatorSettings (module singleton if omitted)
        registry: CodewordRegistry (shared default if omitted)

    Example:
        >>> result = markup_compile("<wave>Hi</wave> there")
        >>> result.cleanText
        'Hi there'
        >>> result.timeline[0].start_index, result.timeline[0].end_index
        (0, 2)
    """
    settings = settings or appsettings
    state = CompileState(
        source=source,
        verbosity=settings.verbosity,
        settings=settings,
        registry=registry or registry_default(),
    )
    state_connectToLogger(state)

    if state.verbosity >= 3:
        LOG(f"Compiling:\n{source_highlight(source)}", level=3)

    final = pipeline(state, source_tokenize, pauses_split, timeline_compile)
    errors_report(source, final.errors)

    return CompileResult(
        cleanText=final.cleanText,
        timeline=tuple(final.timeline),
        errors=tuple(final.errors),
        tokens=tuple(final.tokens),
        processedTokens=tuple(final.processedTokens),
        visibleCount=final.visibleCount,
    )
