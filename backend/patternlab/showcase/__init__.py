"""
Pattern Showcase

One self-contained module per pattern, each with a ``demonstrate`` routine
that prints its sample output:
- singleton, factory, adapter, decorator, strategy, observer
"""

from . import adapter, decorator, factory, observer, singleton, strategy

__all__ = ["singleton", "factory", "adapter", "decorator", "strategy", "observer"]
