"""
Singleton Pattern

Three ways to guarantee one shared instance per process:

- EagerSingleton: built when this module is imported
- LazySingleton: built on first access, without any locking
- ThreadSafeSingleton: built on first access under a lock
"""

import itertools
import logging
from typing import Optional

from patternlab.core.patterns.singleton import Singleton
from patternlab.decorators.traced import traced

logger = logging.getLogger(__name__)

_serials = itertools.count(1)


class EagerSingleton:
    """
    Eagerly created singleton.

    The instance exists before anyone asks for it; ``get_instance`` just
    returns it, and so does calling the class.
    """

    _instance: "EagerSingleton"

    def __new__(cls):
        instance = cls.__dict__.get("_instance")
        if instance is None:
            instance = super().__new__(cls)
        return instance

    def __init__(self):
        if hasattr(self, "serial"):
            return
        self.serial = next(_serials)

    @classmethod
    def get_instance(cls) -> "EagerSingleton":
        return cls._instance


EagerSingleton._instance = EagerSingleton()


class LazySingleton:
    """
    Lazily created singleton.

    Calling the class and calling ``get_instance`` both go through the same
    check-then-create in ``__new__``.

    Warning: that check-then-create is not synchronized. Two threads
    constructing it for the first time at once can both see no instance and
    both construct one. Use ThreadSafeSingleton when the first access can
    happen concurrently.
    """

    _instance: Optional["LazySingleton"] = None

    def __new__(cls):
        if cls._instance is None:
            logger.debug("Creating LazySingleton instance")
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if hasattr(self, "serial"):
            return
        self.serial = next(_serials)

    @classmethod
    def get_instance(cls) -> "LazySingleton":
        return cls()

    @classmethod
    def reset_instance(cls) -> None:
        """
        Forget the stored instance so the next access builds a new one.
        Only meant for tests.
        """
        cls._instance = None


class ThreadSafeSingleton(Singleton):
    """Lazily created singleton whose construction is guarded by a lock."""

    def _setup(self):
        self.serial = next(_serials)
        logger.debug("Created ThreadSafeSingleton instance")


@traced(label="singleton")
def demonstrate() -> None:
    first, second = EagerSingleton.get_instance(), EagerSingleton.get_instance()
    print(f"Eager singleton: same instance = {first is second}")

    first, second = LazySingleton.get_instance(), LazySingleton.get_instance()
    print(f"Lazy singleton: same instance = {first is second}")

    first, second = ThreadSafeSingleton.get_instance(), ThreadSafeSingleton()
    print(f"Thread-safe singleton: same instance = {first is second}")
