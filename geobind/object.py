"""
Wrapper base class.

Every wrapper owns one engine handle. The handle is materialized on first
need and memoized in the wrapper's cache together with any other derived
handles; cache entries live as long as the wrapper and are never
invalidated. A wrapper built without configuration is an uninitialized
shell, which from_() completes by adopting an existing engine handle.

Exports:
    GeoObject: Base class for wrappers
"""

from typing import Any, Callable, ClassVar, Dict, Optional


class GeoObject:
    """
    Base class for objects that wrap an engine object.

    Subclasses implement _materialize() to create their engine handle on
    first access and the config property for round-tripping.
    """

    type_name: ClassVar[str] = "GeoObject"

    # FactoryRegistry passes itself as registry= to registry-aware types
    _registry_aware: ClassVar[bool] = True

    def __init__(self, config: Any = None, engine: Any = None, registry: Any = None):
        self._engine = engine
        self._registry = registry
        self.cache: Dict[str, Any] = {}

    @property
    def engine(self):
        """Engine collaborator; the process default unless one was given."""
        if self._engine is None:
            from geobind.engine import get_engine
            return get_engine()
        return self._engine

    @property
    def registry(self):
        """Factory registry; the process default unless one was given."""
        if self._registry is None:
            from geobind.factory.registry import get_registry
            return get_registry()
        return self._registry

    def cached(self, key: str, compute: Callable[[], Any]) -> Any:
        """Return the memoized value for key, computing it on first access."""
        if key not in self.cache:
            self.cache[key] = compute()
        return self.cache[key]

    @property
    def handle(self) -> Any:
        """Underlying engine object."""
        return self.cached("handle", self._materialize)

    @property
    def is_constructed(self) -> bool:
        return "handle" in self.cache

    def _materialize(self) -> Any:
        raise NotImplementedError(f"{type(self).__name__} cannot create its engine object")

    @classmethod
    def from_(cls, handle: Any, engine: Any = None, registry: Any = None):
        """
        Wrap an existing engine object without rebuilding it.

        Args:
            handle: Engine object handed back by the engine
        """
        wrapper = cls(engine=engine, registry=registry)
        wrapper.cache["handle"] = handle
        return wrapper

    @property
    def config(self) -> Dict[str, Any]:
        raise NotImplementedError

    def to_full_string(self) -> str:
        return ""

    def __repr__(self) -> str:
        full = self.to_full_string()
        return f"<{type(self).__name__}{' ' + full if full else ''}>"
