from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO, Mapping, Union

import wordy.runtime as rt
from wordy import highlight
from wordy.ast import ExpressionNode
from wordy.codegen import generate_code
from wordy.config import Settings, get_settings

logger = logging.getLogger("wordy.interpreter")

ContextLike = Union[rt.EvaluationContext, Mapping[str, float], None]


@dataclass(frozen=True)
class Outcome:
    """Either the value of an expression or the error it failed with."""
    value: Optional[float] = None
    error: Optional[rt.EvaluationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        """Get value or raise the evaluation error."""
        if self.error is not None:
            raise self.error
        return self.value

    def value_or(self, default: float) -> float:
        if self.error is not None:
            return default
        return self.value


class Interpreter:
    """Drives evaluation and compilation of expression trees."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings: Settings = settings or get_settings()

    @staticmethod
    def make_context(**variables: float) -> rt.EvaluationContext:
        """Create evaluation context with the given variable values."""
        return rt.EvaluationContext(symbols=variables)

    def evaluate(self, node: ExpressionNode, context: ContextLike = None) -> float:
        """Evaluate expression tree, evaluation errors are propagated."""
        logger.debug("Evaluating %s", node.describe())
        return node.evaluate(rt.EvaluationContext.of(context))

    def try_evaluate(self, node: ExpressionNode, context: ContextLike = None) -> Outcome:
        """Evaluate expression tree and capture evaluation errors."""
        try:
            return Outcome(value=self.evaluate(node, context))
        except rt.EvaluationError as error:
            logger.debug("Evaluation failed: %s", error)
            return Outcome(error=error)

    def compile(self, node: ExpressionNode) -> str:
        """Translate expression tree to JavaScript source text."""
        logger.debug("Compiling %s", node.describe())
        return generate_code(node)

    def print_code(self, node: ExpressionNode, output: TextIO = sys.stdout):
        """Print syntax-highlighted JavaScript code of the expression."""
        style = highlight.make_style(self.settings.highlight_style)
        highlight.print_code(self.compile(node), output=output, style=style)

    @staticmethod
    def print_error(error: rt.EvaluationError, output: TextIO = sys.stderr):
        """Print evaluation error."""
        if error.node is not None:
            print(f"  In expression {error.node.describe()}", file=output)
        print(f"{type(error).__name__}: {str(error)}", file=output)
