#!/usr/bin/env python3
"""
Test script for the Strategy pattern example.
"""

import contextlib
import io
import os
import sys

import pytest

sys.path.append(os.path.dirname(__file__))

from patternlab.showcase.strategy import (
    Context,
    OperationAdd,
    OperationMultiply,
    OperationSubtract,
    UnknownOperatorError,
    demonstrate,
    strategy_for,
    supported_operators,
)


def test_each_strategy():
    print("Testing strategies...")

    assert Context(OperationAdd()).execute_strategy(10, 5) == 15
    assert Context(OperationSubtract()).execute_strategy(10, 5) == 5
    assert Context(OperationMultiply()).execute_strategy(10, 5) == 50
    assert Context(OperationSubtract()).execute_strategy(5, 10) == -5
    print("✓ add, subtract and multiply")


def test_swapping_strategy_changes_results():
    print("\nTesting strategy swap...")

    context = Context(OperationAdd())
    assert context.execute_strategy(3, 4) == 7

    multiply = OperationMultiply()
    context.strategy = multiply
    assert context.strategy is multiply
    assert context.execute_strategy(3, 4) == 12
    assert context.execute_strategy(3, 4) == context.strategy.do_operation(3, 4)
    print("✓ Swapped strategy used without reconstruction")


def test_operator_lookup():
    assert supported_operators() == ["+", "-", "*"]
    assert isinstance(strategy_for("+"), OperationAdd)
    assert isinstance(strategy_for("-"), OperationSubtract)
    assert isinstance(strategy_for("*"), OperationMultiply)

    with pytest.raises(UnknownOperatorError) as excinfo:
        strategy_for("/")
    assert excinfo.value.symbol == "/"
    assert isinstance(excinfo.value, ValueError)
    print("✓ Operator lookup working")


def test_demonstration_output():
    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        demonstrate(10, 5)

    assert buffer.getvalue().splitlines() == ["10 + 5 = 15", "10 - 5 = 5", "10 * 5 = 50"]

    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        demonstrate(2, 3)
    assert buffer.getvalue().splitlines() == ["2 + 3 = 5", "2 - 3 = -1", "2 * 3 = 6"]
    print("✓ Demonstration output matches")


def main():
    print("🔍 Testing Strategy Implementation")
    print("=" * 50)
    try:
        test_each_strategy()
        test_swapping_strategy_changes_results()
        test_operator_lookup()
        test_demonstration_output()
        print("\n🎉 All strategy tests passed!")
    except Exception as e:
        print(f"\n❌ Test failed: {e}")
        return False
    return True


if __name__ == "__main__":
    exit(0 if main() else 1)
