"""Dependency injection container.

Wires the graph, network, rendering adapters and the street searcher
service together. Factories are registered per port type and
instantiated lazily on first resolution.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        searcher = container.resolve(StreetSearcherService)

        # Testing
        container = Container()
        container.register(PathFinderPort, lambda: FakePathFinder())
        finder = container.resolve(PathFinderPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _transient: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Registering a type again replaces its factory and drops any
        instance already built from the old one.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If False, every resolution builds a new instance.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._transient.discard(port_type)
            else:
                self._transient.add(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            factory = self._factories.get(port_type)
            if factory is None:
                raise KeyError(f"Type not registered: {port_type}")
            if port_type in self._transient:
                return factory()
            if port_type not in self._singletons:
                self._singletons[port_type] = factory()
            return self._singletons[port_type]

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Drop cached instances; factories stay registered."""
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(
        cls,
        config: Optional[AppConfig] = None,
        network_path: Optional[Path] = None,
    ) -> Container:
        """Create a container with default bindings.

        Args:
            config: Optional configuration override.
            network_path: Optional network file overriding the
                configured one.

        Returns:
            A configured Container instance.
        """
        from .adapters.graph import DijkstraPathFinder
        from .adapters.network import TextNetworkRepository
        from .adapters.rendering import DotGraphRenderer
        from .ports.graph import PathFinderPort
        from .ports.network import NetworkRepositoryPort
        from .ports.rendering import GraphRendererPort
        from .services import StreetSearcherService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            PathFinderPort,
            lambda: DijkstraPathFinder(
                reject_negative_weights=config.search.reject_negative_weights
            ),
        )
        container.register(
            NetworkRepositoryPort,
            lambda: TextNetworkRepository(config.network, path=network_path),
        )
        container.register(GraphRendererPort, lambda: DotGraphRenderer())

        # Each resolution gets its own graph
        container.register(
            StreetSearcherService,
            lambda: StreetSearcherService(
                path_finder=container.resolve(PathFinderPort),
                repository=container.resolve(NetworkRepositoryPort),
                renderer=container.resolve(GraphRendererPort),
            ),
            singleton=False,
        )

        return container
