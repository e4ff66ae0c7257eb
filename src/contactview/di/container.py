from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Set, Type

from .lifetime import Lifetime
from ..errors import CircularDependencyError, ResolutionError


@dataclass
class Registration:
    interface: Type
    implementation: Optional[Type] = None
    lifetime: Lifetime = Lifetime.TRANSIENT
    factory: Optional[Callable[["Container"], Any]] = None
    kwargs: Dict[str, Any] = field(default_factory=dict)


class Container:
    """Minimal dependency container.

    Factories receive the container so they can resolve their own
    collaborators; resolution cycles raise :class:`CircularDependencyError`.
    """

    def __init__(self):
        self._registrations: Dict[Type, Registration] = {}
        self._singleton_instances: Dict[Type, Any] = {}
        self._resolving: Set[Type] = set()

    # --- Registration ---

    def register_singleton(self, interface: Type, implementation: Optional[Type] = None, **kwargs):
        self._register(interface, implementation, Lifetime.SINGLETON, kwargs=kwargs)

    def register_transient(self, interface: Type, implementation: Optional[Type] = None, **kwargs):
        self._register(interface, implementation, Lifetime.TRANSIENT, kwargs=kwargs)

    def register_factory(
        self,
        interface: Type,
        factory: Callable[["Container"], Any],
        lifetime: Lifetime = Lifetime.TRANSIENT,
    ):
        self._register(interface, None, lifetime, factory=factory)

    def register_instance(self, interface: Type, instance: Any):
        self._registrations[interface] = Registration(interface=interface, lifetime=Lifetime.SINGLETON)
        self._singleton_instances[interface] = instance

    def is_registered(self, interface: Type) -> bool:
        return interface in self._registrations

    # --- Resolution ---

    def resolve(self, interface: Type) -> Any:
        if interface not in self._registrations:
            raise ResolutionError(f"No registration found for {interface}")
        if interface in self._resolving:
            raise CircularDependencyError(f"Circular dependency detected for {interface}")
        self._resolving.add(interface)
        try:
            reg = self._registrations[interface]
            if reg.lifetime == Lifetime.SINGLETON:
                if interface not in self._singleton_instances:
                    self._singleton_instances[interface] = self._create(reg)
                return self._singleton_instances[interface]
            return self._create(reg)
        finally:
            self._resolving.discard(interface)

    # --- Helpers ---

    def _register(self, interface, implementation, lifetime, factory=None, kwargs=None):
        self._singleton_instances.pop(interface, None)
        self._registrations[interface] = Registration(
            interface=interface,
            implementation=implementation or (None if factory else interface),
            lifetime=lifetime,
            factory=factory,
            kwargs=kwargs or {},
        )

    def _create(self, reg: Registration) -> Any:
        if reg.factory:
            return reg.factory(self)
        impl = reg.implementation or reg.interface
        return impl(**reg.kwargs)
