"""
Design Patterns Module

Reusable pattern infrastructure shared by the rest of the package.
Currently includes:
- Singleton Pattern: thread-safe base used by the config and example managers
  and by the thread-safe variant in the Singleton showcase
"""

from .singleton import Singleton, SingletonMeta, SingletonABCMeta

__all__ = ["Singleton", "SingletonMeta", "SingletonABCMeta"]
