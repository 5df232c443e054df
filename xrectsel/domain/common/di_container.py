# xrectsel/domain/common/di_container.py

"""
Dependency injection container used to wire the command line.

The real wiring lives in xrectsel.application.app; tests build their own
container and register fakes (most importantly a scripted display) in place
of the X11-backed services.
"""
from typing import Any, Callable, Dict, Set, Type, TypeVar

T = TypeVar('T')


class DIContainer:
    """Maps interface types to instances or to factories that build them."""

    def __init__(self):
        self._instances: Dict[type, Any] = {}
        self._factories: Dict[type, Callable[[], Any]] = {}
        self._singletons: Set[type] = set()
        self._resolving: Set[type] = set()

    def register_instance(self, base_type: Type[T], instance: T) -> None:
        """Always return ``instance`` for ``base_type``; replaces any factory."""
        self._factories.pop(base_type, None)
        self._instances[base_type] = instance

    def register_factory(self, base_type: Type[T], factory: Callable[[], T],
                         singleton: bool = False) -> None:
        """
        Register a factory for ``base_type``.

        Args:
            base_type: The interface being registered
            factory: Zero-argument callable building an implementation
            singleton: Keep the first built instance and return it afterwards
        """
        self._instances.pop(base_type, None)
        self._factories[base_type] = factory
        if singleton:
            self._singletons.add(base_type)
        else:
            self._singletons.discard(base_type)

    def resolve(self, base_type: Type[T]) -> T:
        """
        Resolve ``base_type`` to an instance.

        Raises:
            ValueError: If the type is not registered or its factories form a cycle
        """
        if base_type in self._instances:
            return self._instances[base_type]

        if base_type not in self._factories:
            raise ValueError(f"No registration found for {base_type.__name__}")

        if base_type in self._resolving:
            raise ValueError(f"Circular dependency detected while resolving {base_type.__name__}")

        self._resolving.add(base_type)
        try:
            instance = self._factories[base_type]()
        finally:
            self._resolving.remove(base_type)

        if base_type in self._singletons:
            self._instances[base_type] = instance
        return instance
