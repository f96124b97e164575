import pytest

import wordy.runtime as rt


def test_lookup():
    context = rt.EvaluationContext({"x": 1, "y": 2.5})

    assert context.lookup("x") == 1.0
    assert isinstance(context.lookup("x"), float)
    assert context.lookup("y") == 2.5


def test_lookup_missing_name():
    with pytest.raises(rt.UndefinedVariable) as info:
        rt.EvaluationContext({"x": 1}).lookup("z")

    assert info.value.name == "z"
    assert info.value.node is None
    assert "z" in str(info.value)


def test_nested_context_shadows_parent():
    parent = rt.EvaluationContext({"x": 1, "y": 2})
    child = parent.nested({"x": 10})

    assert child.lookup("x") == 10
    assert child.lookup("y") == 2
    assert parent.lookup("x") == 1


def test_contains():
    context = rt.EvaluationContext({"x": 1}).nested({"y": 2})

    assert "x" in context
    assert "y" in context
    assert "z" not in context


def test_context_is_not_affected_by_source_mapping():
    symbols = {"x": 1}
    context = rt.EvaluationContext(symbols)

    symbols["x"] = 2

    assert context.lookup("x") == 1


def test_of_wraps_mappings():
    context = rt.EvaluationContext({"x": 1})

    assert rt.EvaluationContext.of(context) is context
    assert rt.EvaluationContext.of({"x": 3}).lookup("x") == 3
    assert "x" not in rt.EvaluationContext.of(None)


def test_of_rejects_other_objects():
    with pytest.raises(TypeError):
        rt.EvaluationContext.of([("x", 1)])


def test_error_hierarchy():
    assert issubclass(rt.UndefinedVariable, rt.EvaluationError)
    assert issubclass(rt.DivisionByZero, rt.EvaluationError)
    assert issubclass(rt.DivisionByZero, ZeroDivisionError)
    assert issubclass(rt.UnsupportedOperator, rt.EvaluationError)
    assert str(rt.DivisionByZero()) == "Division by zero"
