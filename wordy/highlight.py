import sys
from typing import Optional, TextIO

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText, PygmentsTokens, StyleAndTextTuples, to_formatted_text
from prompt_toolkit.styles import Style, style_from_pygments_cls
from pygments import lex
from pygments.lexers.javascript import JavascriptLexer
from pygments.styles import get_style_by_name

from wordy.config import get_settings


def make_style(name: Optional[str] = None) -> Style:
    """Make prompt-toolkit style from pygments style name."""
    name = name or get_settings().highlight_style
    return style_from_pygments_cls(get_style_by_name(name))


def highlight(code: str) -> StyleAndTextTuples:
    """Split generated code into styled fragments."""
    tokens = lex(code, JavascriptLexer(stripnl=False, ensurenl=False))
    return to_formatted_text(PygmentsTokens(list(tokens)))


def print_code(code: str, output: TextIO = sys.stdout, style: Optional[Style] = None):
    """Print syntax-highlighted code."""
    print_formatted_text(
        FormattedText(highlight(code)),
        style=style or make_style(),
        file=output,
        include_default_pygments_style=False,
    )
