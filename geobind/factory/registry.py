"""
Factory Registry - polymorphic construction from configuration data.

Maps wrapper classes to predicates that inspect untyped configuration.
Dispatch normalizes the configuration, scans entries in precedence order
(higher priority first, then registration order) and instantiates the
first wrapper whose predicate accepts it.

A predicate is either a plain function ``handles(config) -> bool`` or a
pydantic model: the configuration is tried against the model and a
successful ``model_validate`` counts as a match (tagged-variant decode).

Registries are ordinary instances. The process default is assembled once
by ``geobind.registration.build_default_registry`` on first use; callers
that need isolation build their own and pass it with ``registry=``.

Usage:
    registry = FactoryRegistry()
    registry.register(Schema, handles=lambda c: isinstance(c.get("fields"), list))
    schema = registry.create([{"name": "the_geom", "type": "Point"}])

Exports:
    FactoryEntry: (type, predicate) pair
    FactoryRegistry: Ordered registry and dispatcher
    get_registry: Process default registry
    set_registry: Replace the process default registry
"""

import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from geobind.exceptions import NoMatchingFactory
from geobind.factory.normalizer import discriminator, normalize
from geobind.util_logger import ComponentType, LoggerFactory


logger = LoggerFactory.create_logger(ComponentType.FACTORY, "FactoryRegistry")

_sequence = itertools.count()


@dataclass(frozen=True)
class FactoryEntry:
    """
    A wrapper type paired with the predicate that selects it.

    Attributes:
        type: Wrapper class instantiated as ``type(config, *args, **kwargs)``
        handles: Optional predicate over the canonical configuration
        model: Optional pydantic model; validation success is a match
        priority: Higher values are consulted first
        sequence: Registration order, used to break priority ties
    """
    type: Type
    handles: Optional[Callable[[Dict[str, Any]], bool]] = None
    model: Optional[Type[BaseModel]] = None
    priority: int = 0
    sequence: int = field(default_factory=lambda: next(_sequence))

    def __post_init__(self):
        if self.handles is None and self.model is None:
            raise TypeError(
                f"Factory for {self.type.__name__} needs a handles predicate or a variant model"
            )

    def matches(self, config: Dict[str, Any]) -> bool:
        """Return True if this entry accepts the canonical configuration."""
        if self.model is not None:
            try:
                self.model.model_validate(config)
            except ValidationError:
                return False
            if self.handles is None:
                return True
        return bool(self.handles(config))


class FactoryRegistry:
    """
    Ordered, append-only registry of factory entries.

    Re-registering a type is allowed and simply adds another entry.
    Registration is expected to finish before dispatch begins; the registry
    does no locking.
    """

    def __init__(self, name: str = "default"):
        self.name = name
        self._entries: List[FactoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"<FactoryRegistry {self.name} entries={len(self._entries)}>"

    @property
    def entries(self) -> List[FactoryEntry]:
        """Entries in dispatch precedence order."""
        return sorted(self._entries, key=lambda e: (-e.priority, e.sequence))

    def register(
        self,
        wrapper_type: Any,
        handles: Optional[Callable[[Dict[str, Any]], bool]] = None,
        model: Optional[Type[BaseModel]] = None,
        priority: int = 0
    ) -> FactoryEntry:
        """
        Register a wrapper type.

        Args:
            wrapper_type: Wrapper class, or a ready-made FactoryEntry
            handles: Predicate over the canonical configuration
            model: Pydantic variant model used as the predicate
            priority: Precedence; ties resolve by registration order

        Returns:
            The stored FactoryEntry
        """
        if isinstance(wrapper_type, FactoryEntry):
            entry = wrapper_type
        else:
            entry = FactoryEntry(
                type=wrapper_type, handles=handles, model=model, priority=priority
            )
        self._entries.append(entry)
        logger.debug(
            f"Registered {entry.type.__name__} in {self.name} registry "
            f"(priority {entry.priority}, position {len(self._entries)})"
        )
        return entry

    def factory(
        self,
        handles: Optional[Callable[[Dict[str, Any]], bool]] = None,
        model: Optional[Type[BaseModel]] = None,
        priority: int = 0
    ):
        """
        Decorator form of register().

        Example:
            @registry.factory(handles=lambda c: c.get("type") == "Marker")
            class Marker(Symbolizer):
                ...
        """
        def decorator(wrapper_type):
            self.register(wrapper_type, handles=handles, model=model, priority=priority)
            return wrapper_type
        return decorator

    def find(self, config: Any, base: Optional[type] = None) -> Optional[FactoryEntry]:
        """
        Return the entry that would construct this configuration, or None.

        Args:
            config: Raw configuration (normalized here)
            base: Only consider wrapper types that subclass this base
        """
        canonical = normalize(config)
        return self._select(canonical, base)

    def create(self, config: Any, *args, base: Optional[type] = None, **kwargs):
        """
        Construct the wrapper selected for a configuration.

        Args:
            config: Raw configuration (string, sequence, mapping...)
            *args: Extra positional arguments for the wrapper constructor
            base: Desired base capability; entries of other types are skipped
            **kwargs: Extra keyword arguments for the wrapper constructor

        Returns:
            New wrapper instance

        Raises:
            NoMatchingFactory: If no entry accepts the configuration
        """
        canonical = normalize(config)
        entry = self._select(canonical, base)
        if entry is None:
            raise NoMatchingFactory(canonical, discriminator(canonical), base)

        if getattr(entry.type, "_registry_aware", False):
            kwargs.setdefault("registry", self)

        logger.debug(f"Dispatching configuration to {entry.type.__name__}")
        return entry.type(canonical, *args, **kwargs)

    def clear(self) -> None:
        """Remove every entry (useful for testing)."""
        self._entries.clear()
        logger.debug(f"{self.name} registry cleared")

    def _select(self, canonical: Dict[str, Any], base: Optional[type]) -> Optional[FactoryEntry]:
        for entry in self.entries:
            if base is not None and not (
                isinstance(entry.type, type) and issubclass(entry.type, base)
            ):
                continue
            if entry.matches(canonical):
                return entry
        return None


# ============================================================================
# DEFAULT REGISTRY
# ============================================================================

_default_registry: Optional[FactoryRegistry] = None


def get_registry() -> FactoryRegistry:
    """
    Get the process default registry, building it on first call.

    Registration happens in one place, in a fixed order, so dispatch
    precedence does not depend on which modules were imported first.
    """
    global _default_registry
    if _default_registry is None:
        from geobind.registration import build_default_registry
        _default_registry = build_default_registry()
    return _default_registry


def set_registry(registry: Optional[FactoryRegistry]) -> None:
    """
    Replace the process default registry.

    Passing None rebuilds the default registry on next use.
    """
    global _default_registry
    _default_registry = registry
