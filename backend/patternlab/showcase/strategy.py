"""
Strategy Pattern

Context delegates to whichever Strategy it currently holds. Swapping the
strategy changes later results and nothing else.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from patternlab.core.config_manager import config_manager
from patternlab.decorators.traced import traced


class UnknownOperatorError(ValueError):
    """Raised when no strategy is registered for an operator symbol."""

    def __init__(self, symbol: str):
        super().__init__(f"No strategy for operator '{symbol}'")
        self.symbol = symbol


class Strategy(ABC):
    @abstractmethod
    def do_operation(self, a: int, b: int) -> int:
        ...


class OperationAdd(Strategy):
    def do_operation(self, a: int, b: int) -> int:
        return a + b


class OperationSubtract(Strategy):
    def do_operation(self, a: int, b: int) -> int:
        return a - b


class OperationMultiply(Strategy):
    def do_operation(self, a: int, b: int) -> int:
        return a * b


class Context:
    def __init__(self, strategy: Strategy):
        self._strategy = strategy

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: Strategy) -> None:
        self._strategy = strategy

    def execute_strategy(self, a: int, b: int) -> int:
        return self._strategy.do_operation(a, b)


# Operator lookup lives outside the Strategy abstraction
_OPERATORS: Dict[str, Type[Strategy]] = {
    "+": OperationAdd,
    "-": OperationSubtract,
    "*": OperationMultiply,
}


def strategy_for(symbol: str) -> Strategy:
    """Return a new strategy for ``symbol``, or raise UnknownOperatorError."""
    try:
        return _OPERATORS[symbol]()
    except KeyError:
        raise UnknownOperatorError(symbol) from None


def supported_operators() -> List[str]:
    return list(_OPERATORS)


@traced(label="strategy")
def demonstrate(a: Optional[int] = None, b: Optional[int] = None) -> None:
    default_a, default_b = config_manager.get_strategy_operands()
    a = default_a if a is None else a
    b = default_b if b is None else b

    context = Context(OperationAdd())
    for symbol in supported_operators():
        context.strategy = strategy_for(symbol)
        print(f"{a} {symbol} {b} = {context.execute_strategy(a, b)}")
