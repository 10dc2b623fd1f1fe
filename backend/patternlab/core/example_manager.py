from typing import Callable, Dict, Iterable, List, Optional
import logging
from patternlab.core.patterns.singleton import Singleton
from patternlab.core.config_manager import config_manager
from patternlab.decorators.traced import call_recorder
from patternlab.showcase import adapter, decorator, factory, observer, singleton, strategy


Routine = Callable[[], None]


class ExampleManager(Singleton):
    """
    Singleton Example Manager.

    Keeps the catalog of demonstration routines, in registration order, and
    runs them by name.
    """

    def _setup(self):
        self._examples: Dict[str, Routine] = {}
        self._logger = logging.getLogger(__name__)
        self._register_core_examples()

    def _register_core_examples(self):
        self.register_example("singleton", singleton.demonstrate)
        self.register_example("factory", factory.demonstrate)
        self.register_example("adapter", adapter.demonstrate)
        self.register_example("decorator", decorator.demonstrate)
        self.register_example("strategy", strategy.demonstrate)
        self.register_example("observer", observer.demonstrate)
        self._logger.info("Core examples registered successfully")

    def register_example(self, name: str, routine: Routine):
        """
        Register a demonstration routine.

        Args:
            name: The name to register the routine under
            routine: A callable taking no arguments that prints its output
        """
        self._examples[name] = routine
        self._logger.debug(f"Example '{name}' registered")

    def get_example(self, name: str) -> Optional[Routine]:
        return self._examples.get(name)

    def has_example(self, name: str) -> bool:
        return name in self._examples

    def unregister_example(self, name: str) -> bool:
        """
        Unregister an example.

        Returns:
            True if the example was unregistered, False if it wasn't found
        """
        if name in self._examples:
            del self._examples[name]
            self._logger.debug(f"Example '{name}' unregistered")
            return True
        return False

    def list_examples(self) -> List[str]:
        return list(self._examples.keys())

    def run_example(self, name: str) -> None:
        """
        Run one demonstration by name.

        Raises:
            KeyError: If no example is registered under ``name``
        """
        routine = self.get_example(name)
        if routine is None:
            self._logger.error(f"Unknown example '{name}'. Available: {', '.join(self.list_examples())}")
            raise KeyError(name)
        routine()

    def run_all(self, names: Optional[Iterable[str]] = None) -> List[str]:
        """
        Run several demonstrations in order, each under a ``== name ==`` header.

        Args:
            names: Examples to run. Defaults to the ones enabled in settings.

        Returns:
            The names that were run

        Raises:
            KeyError: If any name is not registered; nothing is run then
        """
        selected = list(names) if names is not None else config_manager.get_enabled_examples()
        unknown = [name for name in selected if not self.has_example(name)]
        if unknown:
            self._logger.error(f"Unknown example(s) '{', '.join(unknown)}'. Available: {', '.join(self.list_examples())}")
            raise KeyError(unknown[0])
        for name in selected:
            print(f"== {name} ==")
            self.run_example(name)
        return selected

    def get_catalog_status(self) -> dict:
        """
        Get the state of the catalog.

        Returns:
            Dictionary with registered examples and how often each has run
        """
        runs = call_recorder.snapshot()
        return {
            "examples_registered": len(self._examples),
            "example_names": self.list_examples(),
            "enabled_examples": config_manager.get_enabled_examples(),
            "run_counts": {name: runs.get(name, 0) for name in self._examples},
            "debug_mode": config_manager.is_debug_mode(),
        }


example_manager = ExampleManager.get_instance()
