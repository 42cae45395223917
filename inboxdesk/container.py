"""A container of singleton services looked up by type."""

from __future__ import annotations

from typing import Dict, Type, TypeVar


class Service:
    """Base class of everything a ServiceContainer may hold."""


S = TypeVar("S", bound=Service)


class ServiceContainer:
    """Holds one instance of each service type."""

    def __init__(self) -> None:
        self._services: Dict[type, Service] = {}

    def add_singleton(self, service: Service) -> None:
        """Register a service under its own type, replacing any earlier one."""
        if not isinstance(service, Service):
            raise TypeError(f"{service!r} is not a service")
        self._services[type(service)] = service

    def get_service(self, service_type: Type[S]) -> S:
        if not (isinstance(service_type, type) and issubclass(service_type, Service)):
            raise TypeError(f"{service_type!r} is not a service type")
        try:
            return self._services[service_type]  # type: ignore[return-value]
        except KeyError:
            raise KeyError(f"No service registered for {service_type.__name__}") from None