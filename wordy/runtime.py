from __future__ import annotations

from collections.abc import Mapping
from typing import Optional, Dict, Any

SymbolTable = Dict[str, float]


class EvaluationError(Exception):
    """Parent class for expression evaluation errors."""

    def __init__(self, message: str, node: Optional[Any] = None):
        super().__init__(message)
        self.node = node


class UndefinedVariable(EvaluationError):
    """Variable is not defined in the evaluation context."""

    def __init__(self, name: str, node: Optional[Any] = None):
        super().__init__(f"Variable is not defined: {name}", node)
        self.name: str = name


class DivisionByZero(EvaluationError, ZeroDivisionError):
    """Right operand of a division is exactly zero."""

    def __init__(self, node: Optional[Any] = None):
        super().__init__("Division by zero", node)


class UnsupportedOperator(EvaluationError):
    """Operator is outside of the fixed set known to the node."""

    def __init__(self, operator: Any, node: Optional[Any] = None):
        super().__init__(f"Unsupported operator: {operator!r}", node)
        self.operator = operator


class EvaluationContext:
    """Read-only binding of variable names to their current values.

    Contexts may be layered: a nested context shadows its parent and
    falls back to it for names it doesn't define.
    """

    def __init__(self, symbols: Optional[Mapping[str, float]] = None, parent: Optional[EvaluationContext] = None):
        symbols = symbols or {}
        self._symbols: SymbolTable = {name: float(value) for name, value in symbols.items()}
        self.parent: Optional[EvaluationContext] = parent

    @staticmethod
    def of(context: Any) -> EvaluationContext:
        """Wrap a plain mapping into a context, pass contexts through."""
        if isinstance(context, EvaluationContext):
            return context
        if context is None:
            return EvaluationContext()
        if isinstance(context, Mapping):
            return EvaluationContext(symbols=context)
        raise TypeError(f"Unsupported evaluation context: {type(context).__name__}")

    def lookup(self, name: str) -> float:
        if name in self._symbols:
            return self._symbols[name]
        elif self.parent is not None:
            return self.parent.lookup(name)
        else:
            raise UndefinedVariable(name)

    def nested(self, symbols: Optional[Mapping[str, float]] = None) -> EvaluationContext:
        return EvaluationContext(symbols=symbols, parent=self)

    def __contains__(self, name: str) -> bool:
        if name in self._symbols:
            return True
        return self.parent is not None and name in self.parent

    def __repr__(self):
        return f"EvaluationContext({self._symbols!r}, parent={self.parent!r})"
