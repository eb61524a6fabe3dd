# Standard library imports
from typing import Any, Callable, Dict


class BaseContainer:
    """
    Minimal registry mapping keys (usually classes) to singletons or factories.
    
    Singletons are returned as-is; factories are called on every get().
    """
    
    def __init__(self) -> None:
        self._singletons: Dict[Any, Any] = {}
        self._factories: Dict[Any, Callable[[], Any]] = {}
    
    def register_singleton(self, key: Any, instance: Any) -> None:
        """Register a shared instance under key"""
        self._factories.pop(key, None)
        self._singletons[key] = instance
    
    def register_factory(self, key: Any, factory: Callable[[], Any]) -> None:
        """Register a zero-argument factory invoked on each lookup"""
        self._singletons.pop(key, None)
        self._factories[key] = factory
    
    def is_registered(self, key: Any) -> bool:
        return key in self._singletons or key in self._factories
    
    def get(self, key: Any) -> Any:
        """
        Resolve a registration
        
        Raises:
            ValueError: If nothing is registered under key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise ValueError(f"No registration found for {name}")
