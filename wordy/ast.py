from __future__ import annotations

import abc
import enum
import math
from dataclasses import dataclass
from typing import Dict, Iterator, List, Any

import wordy.runtime as rt
from wordy.codegen import Emitter, POWER_FUNCTION, format_number, is_identifier


class Node(abc.ABC):
    """Basic node class."""

    def children(self) -> Dict[str, Node]:
        """Child nodes by their role, in construction order."""
        return {}

    def describe_attributes(self) -> str:
        """Describe own (non-child) attributes."""
        return ""

    def describe(self) -> str:
        return type(self).__name__ + self.describe_attributes()

    def walk(self) -> Iterator[Node]:
        """Iterate over the node and its descendants in pre-order."""
        yield self
        for child in self.children().values():
            yield from child.walk()

    def dump(self) -> str:
        """Render the tree as indented text, one node per line."""
        lines: List[str] = []
        self._dump(lines, label=None, indent=0)
        return "\n".join(lines)

    def _dump(self, lines: List[str], label, indent: int):
        prefix = "  " * indent
        if label is not None:
            prefix += f"{label}: "
        lines.append(prefix + self.describe())
        for child_label, child in self.children().items():
            child._dump(lines, label=child_label, indent=indent + 1)


class ExpressionNode(Node):
    """Node producing a numeric value."""

    def evaluate(self, context: Any = None) -> float:
        """Evaluate expression against the variable values of the context."""
        return self._evaluate(rt.EvaluationContext.of(context))

    @abc.abstractmethod
    def _evaluate(self, context: rt.EvaluationContext) -> float:
        """Evaluate expression in the already prepared context."""

    @abc.abstractmethod
    def compile(self, out: Emitter):
        """Write JavaScript code of the expression."""


class _Operator(enum.Enum):
    def __repr__(self):
        return self.name


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and math.fmod(value, 2) != 0


def _power(base: float, exponent: float) -> float:
    """Raise to power with IEEE results instead of domain and range errors."""
    if math.isnan(exponent):
        return math.nan
    if abs(base) == 1 and math.isinf(exponent):
        return math.nan
    try:
        return math.pow(base, exponent)
    except OverflowError:
        negative = base < 0 and _is_odd_integer(exponent)
        return -math.inf if negative else math.inf
    except ValueError:
        if base == 0:
            # Negative power of zero
            negative = math.copysign(1.0, base) < 0 and _is_odd_integer(exponent)
            return -math.inf if negative else math.inf
        return math.nan


def _check_expression(name: str, value):
    if not isinstance(value, ExpressionNode):
        raise TypeError(f"{name} must be an expression node, got {type(value).__name__}")


@dataclass(frozen=True)
class ConstantNode(ExpressionNode):
    """A literal number, e.g. "3.5"."""
    value: float

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"Constant must be a number, got {type(self.value).__name__}")
        try:
            value = float(self.value)
        except OverflowError as error:
            raise ValueError(f"Constant is too large for a float: {self.value}") from error
        object.__setattr__(self, "value", value)

    def describe_attributes(self) -> str:
        return f"(value={self.value!r})"

    def _evaluate(self, context: rt.EvaluationContext) -> float:
        return self.value

    def compile(self, out: Emitter):
        out.write(format_number(self.value))


@dataclass(frozen=True)
class VariableNode(ExpressionNode):
    """A reference to a variable by name."""
    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not is_identifier(self.name):
            raise ValueError(f"Variable name must be a JavaScript identifier: {self.name!r}")

    def describe_attributes(self) -> str:
        return f"(name={self.name})"

    def _evaluate(self, context: rt.EvaluationContext) -> float:
        try:
            return context.lookup(self.name)
        except rt.UndefinedVariable as error:
            error.node = self
            raise

    def compile(self, out: Emitter):
        out.write(self.name)


@dataclass(frozen=True)
class UnaryExpressionNode(ExpressionNode):
    """An operator applied to a single expression, e.g. "negative x"."""

    class Operator(_Operator):
        NEGATION = enum.auto()

    operator: Operator
    operand: ExpressionNode

    def __post_init__(self):
        if not isinstance(self.operator, UnaryExpressionNode.Operator):
            raise rt.UnsupportedOperator(self.operator)
        _check_expression("operand", self.operand)

    def children(self) -> Dict[str, Node]:
        return {"operand": self.operand}

    def describe_attributes(self) -> str:
        return f"(operator={self.operator.name})"

    def _evaluate(self, context: rt.EvaluationContext) -> float:
        value = self.operand._evaluate(context)
        if self.operator is UnaryExpressionNode.Operator.NEGATION:
            return -value
        raise rt.UnsupportedOperator(self.operator, self)

    def compile(self, out: Emitter):
        if self.operator is not UnaryExpressionNode.Operator.NEGATION:
            raise rt.UnsupportedOperator(self.operator, self)
        out.write("(-")
        self.operand.compile(out)
        out.write(")")


@dataclass(frozen=True)
class BinaryExpressionNode(ExpressionNode):
    """Two expressions joined by an operator, e.g. "x plus y"."""

    class Operator(_Operator):
        ADDITION = enum.auto()
        SUBTRACTION = enum.auto()
        MULTIPLICATION = enum.auto()
        DIVISION = enum.auto()
        EXPONENTIATION = enum.auto()

    operator: Operator
    lhs: ExpressionNode
    rhs: ExpressionNode

    def __post_init__(self):
        if not isinstance(self.operator, BinaryExpressionNode.Operator):
            raise rt.UnsupportedOperator(self.operator)
        _check_expression("lhs", self.lhs)
        _check_expression("rhs", self.rhs)

    def children(self) -> Dict[str, Node]:
        return {"lhs": self.lhs, "rhs": self.rhs}

    def describe_attributes(self) -> str:
        return f"(operator={self.operator.name})"

    def _evaluate(self, context: rt.EvaluationContext) -> float:
        Op = BinaryExpressionNode.Operator
        left = self.lhs._evaluate(context)
        right = self.rhs._evaluate(context)
        if self.operator is Op.ADDITION:
            return left + right
        elif self.operator is Op.SUBTRACTION:
            return left - right
        elif self.operator is Op.MULTIPLICATION:
            return left * right
        elif self.operator is Op.DIVISION:
            if right == 0:
                raise rt.DivisionByZero(self)
            return left / right
        elif self.operator is Op.EXPONENTIATION:
            return _power(left, right)
        else:
            raise rt.UnsupportedOperator(self.operator, self)

    INFIX_SYMBOLS = {
        Operator.ADDITION: "+",
        Operator.SUBTRACTION: "-",
        Operator.MULTIPLICATION: "*",
        Operator.DIVISION: "/",
    }

    def compile(self, out: Emitter):
        if self.operator is BinaryExpressionNode.Operator.EXPONENTIATION:
            out.write(f"{POWER_FUNCTION}(")
            self.lhs.compile(out)
            out.write(", ")
            self.rhs.compile(out)
            out.write(")")
            return

        symbol = self.INFIX_SYMBOLS.get(self.operator)
        if symbol is None:
            raise rt.UnsupportedOperator(self.operator, self)
        out.write("(")
        self.lhs.compile(out)
        out.write(f" {symbol} ")
        self.rhs.compile(out)
        out.write(")")
