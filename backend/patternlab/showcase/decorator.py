"""
Decorator Pattern

Coffee decorators each wrap exactly one inner Coffee and add a fixed amount to
its cost and a fixed suffix to its ingredients. Layers stack without limit.
"""

from abc import ABC, abstractmethod
from functools import reduce
from typing import Type

from patternlab.decorators.traced import traced


class Coffee(ABC):
    @abstractmethod
    def get_cost(self) -> float:
        ...

    @abstractmethod
    def get_ingredients(self) -> str:
        ...

    def describe(self) -> str:
        return f"Cost: {self.get_cost()}; Ingredients: {self.get_ingredients()}"


class SimpleCoffee(Coffee):
    def get_cost(self) -> float:
        return 1.0

    def get_ingredients(self) -> str:
        return "Coffee"


class CoffeeDecorator(Coffee):
    """Base decorator: delegates everything to the wrapped coffee."""

    def __init__(self, decorated_coffee: Coffee):
        self._decorated_coffee = decorated_coffee

    @property
    def inner(self) -> Coffee:
        return self._decorated_coffee

    def get_cost(self) -> float:
        return self._decorated_coffee.get_cost()

    def get_ingredients(self) -> str:
        return self._decorated_coffee.get_ingredients()


class WithMilk(CoffeeDecorator):
    def get_cost(self) -> float:
        return super().get_cost() + 0.5

    def get_ingredients(self) -> str:
        return super().get_ingredients() + ", Milk"


class WithSprinkles(CoffeeDecorator):
    def get_cost(self) -> float:
        return super().get_cost() + 0.2

    def get_ingredients(self) -> str:
        return super().get_ingredients() + ", Sprinkles"


def brew(base: Coffee, *layers: Type[CoffeeDecorator]) -> Coffee:
    """
    Wrap ``base`` in each decorator class in turn.

    The first layer ends up innermost, so ``brew(c, WithMilk, WithSprinkles)``
    is ``WithSprinkles(WithMilk(c))``.
    """
    return reduce(lambda coffee, layer: layer(coffee), layers, base)


@traced(label="decorator")
def demonstrate() -> None:
    coffee: Coffee = SimpleCoffee()
    print(coffee.describe())

    coffee = WithMilk(coffee)
    print(coffee.describe())

    coffee = WithSprinkles(coffee)
    print(coffee.describe())
