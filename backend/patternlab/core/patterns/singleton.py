from abc import ABC, ABCMeta
from typing import Any, Dict, Type
import threading


class SingletonMeta(type):
    """
    Thread-safe Singleton metaclass.

    The first call to the class constructs the instance under a lock; every
    later call returns that same instance, whatever arguments are passed.
    """

    _instances: Dict[Type, Any] = {}
    _lock: threading.Lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                # Re-check: another thread may have won while we waited
                if cls not in cls._instances:
                    instance = super().__call__(*args, **kwargs)
                    cls._instances[cls] = instance
        return cls._instances[cls]

    def has_instance(cls) -> bool:
        """
        Check whether the instance has been constructed yet.
        Only meant for tests.
        """
        return cls in cls._instances

    def drop_instance(cls) -> None:
        """
        Forget the stored instance so the next call builds a new one.
        Only meant for tests.
        """
        with cls._lock:
            cls._instances.pop(cls, None)


class SingletonABCMeta(SingletonMeta, ABCMeta):
    """
    Metaclass that combines Singleton and ABC metaclasses to avoid conflicts.
    """
    pass


class Singleton(ABC, metaclass=SingletonABCMeta):
    """
    Abstract base class for thread-safe singletons.

    Subclasses put their initialization in ``_setup`` instead of ``__init__``;
    it runs once per instance lifetime.
    """

    def __init__(self):
        if hasattr(self, '_initialized'):
            return
        self._initialized = True
        self._setup()

    def _setup(self):
        """
        Override this method to perform actual initialization.
        This method will only be called once during the lifetime of the singleton.
        """
        pass

    @classmethod
    def get_instance(cls):
        """
        Get the singleton instance.

        Returns:
            The singleton instance of the class.
        """
        return cls()

    def reset(self):
        """
        Re-run ``_setup`` on the existing instance.
        This method should be used carefully, mainly for testing purposes.
        """
        if hasattr(self, '_initialized'):
            delattr(self, '_initialized')
        self._initialized = True
        self._setup()
