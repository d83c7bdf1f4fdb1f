"""
Custom Pygments lexer for textmotion markup

Provides syntax highlighting for inline '<directive>' markup when
rendering sources in diagnostics.

Token types:
- Name.Function: Custom animation keywords (wave, /wave, jitter-end, ...)
- Number: Animation parameters after ':'
- Name.Builtin: Native host tags passed through to the renderer
- Punctuation: Brackets and pause characters
- Error: Stray '<' or '>'
"""

import re

from pygments import highlight
from pygments.formatter import Formatter
from pygments.formatters import TerminalFormatter
from pygments.lexer import RegexLexer, bygroups
from pygments.token import Error, Name, Number, Punctuation, Text, Whitespace

from .decoder import registry_default

_KEYWORDS = '|'.join(
    re.escape(keyword)
    for keyword in sorted(registry_default().keywords_list(), key=len, reverse=True)
)


class MarkupLexer(RegexLexer):
    """
    Lexer for rich-text animation markup

    Example:
        Hi <wave: 5, 1>there</wave><b>!</b>

    Tokens:
        wave      → Name.Function
        : 5, 1    → Number
        b, /b     → Name.Builtin
        < >       → Punctuation
    """

    name = 'TextMotion'
    aliases = ['textmotion', 'tmarkup']
    filenames = []

    tokens = {
        'root': [
            # Custom animation directives
            (r'(<)(\s*)(' + _KEYWORDS + r')(\s*)(:[^<>]*)?(>)',
             bygroups(Punctuation, Whitespace, Name.Function, Whitespace, Number, Punctuation)),

            # Native tags (pass through as-is)
            (r'(<)([^<>]*)(>)', bygroups(Punctuation, Name.Builtin, Punctuation)),

            # Unbalanced brackets
            (r'[<>]', Error),

            # Pause punctuation
            (r'\.', Punctuation),

            # Everything else is text
            (r'[^<>.]+', Text),
        ],
    }


def get_lexer() -> MarkupLexer:
    """
    Get the MarkupLexer instance

    Returns:
        MarkupLexer instance ready for use with Pygments
    """
    return MarkupLexer()


def source_highlight(source: str, formatter: Formatter | None = None) -> str:
    """Render markup with Pygments (ANSI terminal colours by default)"""
    return highlight(source, get_lexer(), formatter or TerminalFormatter())
