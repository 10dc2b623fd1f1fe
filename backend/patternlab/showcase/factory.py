"""
Factory Pattern

ShapeFactory builds one of a closed set of Shape variants from a string label.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type
import logging

from patternlab.decorators.traced import traced

logger = logging.getLogger(__name__)


class Shape(ABC):
    """A polygon with a fixed name and side count."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def sides(self) -> int:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sides={self.sides})"


class Triangle(Shape):
    @property
    def name(self) -> str:
        return "Triangle"

    @property
    def sides(self) -> int:
        return 3


class Square(Shape):
    @property
    def name(self) -> str:
        return "Square"

    @property
    def sides(self) -> int:
        return 4


class Pentagon(Shape):
    @property
    def name(self) -> str:
        return "Pentagon"

    @property
    def sides(self) -> int:
        return 5


class ShapeFactory:
    """Creates shapes by their exact, case-sensitive label."""

    _variants: Dict[str, Type[Shape]] = {
        "Triangle": Triangle,
        "Square": Square,
        "Pentagon": Pentagon,
    }

    def create(self, shape_type: str) -> Optional[Shape]:
        """
        Create a new shape for the given label.

        Args:
            shape_type: One of the labels returned by ``known_types``

        Returns:
            A fresh Shape instance, or None when the label is not recognized
        """
        variant = self._variants.get(shape_type)
        if variant is None:
            logger.debug(f"No shape registered for type '{shape_type}'")
            return None
        return variant()

    @classmethod
    def known_types(cls) -> List[str]:
        return list(cls._variants)


@traced(label="factory")
def demonstrate() -> None:
    factory = ShapeFactory()
    for shape_type in ShapeFactory.known_types() + ["Hexagon"]:
        shape = factory.create(shape_type)
        if shape is None:
            print(f"Unknown shape type: {shape_type}")
        else:
            print(f"{shape.name} has {shape.sides} sides")
