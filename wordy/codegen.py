"""JavaScript code generation support: emitters and literal formatting."""
import math
from typing import List, Protocol

# Generated code relies on this function being available in the target runtime.
POWER_FUNCTION = "Math.pow"

# Larger integral values are written in exponent form.
MAX_PLAIN_INTEGER = 1e16

# Names that cannot be used as variables in generated code.
RESERVED_WORDS = frozenset("""
    await break case catch class const continue debugger default delete do else enum
    export extends false finally for function if implements import in instanceof
    interface let new null package private protected public return static super
    switch this throw true try typeof var void while with yield
    Infinity Math NaN arguments eval undefined
""".split())


class Emitter(Protocol):
    """Append-only text sink receiving generated code."""

    def write(self, text: str):
        ...


class StringEmitter:
    """Emitter collecting generated fragments in memory."""

    def __init__(self):
        self._fragments: List[str] = []

    def write(self, text: str):
        self._fragments.append(text)

    def getvalue(self) -> str:
        return "".join(self._fragments)

    def __str__(self):
        return self.getvalue()


def is_identifier(name: str) -> bool:
    """Check name can be written as a JavaScript variable."""
    return name.isascii() and name.isidentifier() and name not in RESERVED_WORDS


def format_number(value: float) -> str:
    """Format number as a JavaScript expression."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "(-Infinity)"
    negative = math.copysign(1.0, value) < 0
    if value.is_integer() and abs(value) < MAX_PLAIN_INTEGER and not (negative and value == 0):
        text = str(int(value))
    else:
        text = repr(value)
    if negative:
        return f"({text})"
    return text


def generate_code(node) -> str:
    """Compile expression tree to JavaScript source text."""
    emitter = StringEmitter()
    node.compile(emitter)
    return emitter.getvalue()
