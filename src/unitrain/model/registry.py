"""Backend registry for method-name dispatch.

Backends register themselves with a decorator and are instantiated by
method name, so adding a backend never touches the dispatch site.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from unitrain.errors import UnsupportedMethodError

if TYPE_CHECKING:
    from unitrain.model.base import BackendAdapter

logger = logging.getLogger(__name__)


class BackendRegistry:
    """Registry of backend adapters keyed by method name.

    Example:
        >>> from unitrain.model.registry import BackendRegistry
        >>> from unitrain.model.base import BackendAdapter
        >>>
        >>> @BackendRegistry.register("my_method")
        ... class MyBackend(BackendAdapter):
        ...     # Implementation
        ...     pass
        >>>
        >>> adapter = BackendRegistry.create("my_method")
    """

    _registry: dict[str, type[BackendAdapter]] = {}

    @classmethod
    def register(cls, method: str) -> Callable[[type[BackendAdapter]], type[BackendAdapter]]:
        """Decorator to register a backend class.

        Parameters:
            method: Method name the backend answers to.

        Returns:
            Decorator function that registers the backend class.

        Raises:
            ValueError: If ``method`` is already registered to another class.
        """

        def decorator(backend_cls: type[BackendAdapter]) -> type[BackendAdapter]:
            existing = cls._registry.get(method)
            if existing is not None and existing.__qualname__ != backend_cls.__qualname__:
                raise ValueError(f"Method '{method}' already registered by {existing.__name__}")
            cls._registry[method] = backend_cls
            backend_cls.method = method
            logger.debug(f"Registered method '{method}' -> {backend_cls.__name__}")
            return backend_cls

        return decorator

    @classmethod
    def create(cls, method: str) -> BackendAdapter:
        """Instantiate the backend registered for ``method``.

        Raises:
            UnsupportedMethodError: If no backend is registered for ``method``.
        """
        return cls.get(method)()

    @classmethod
    def get(cls, method: str) -> type[BackendAdapter]:
        """Get the backend class for ``method``.

        Raises:
            UnsupportedMethodError: If no backend is registered for ``method``.
        """
        if method not in cls._registry:
            raise UnsupportedMethodError(method, cls.list_methods())
        return cls._registry[method]

    @classmethod
    def list_methods(cls) -> list[str]:
        return sorted(cls._registry)

    @classmethod
    def is_registered(cls, method: str) -> bool:
        return method in cls._registry

    @classmethod
    def clear(cls) -> None:
        """Clear all registered backends (primarily for testing)."""
        cls._registry.clear()
        logger.debug("Cleared backend registry")
