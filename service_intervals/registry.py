"""Read-only registry of tracked components."""

from typing import Iterable, Iterator, List, Optional, Tuple

from .component import Component


class ServiceRegistry:
    """
    Components loaded from the service database, in document order.

    The registry only supports enumeration and lookup. Recording a new
    service date is done by editing the database file, never through here.
    """

    def __init__(self, components: Iterable[Component]):
        self._components: Tuple[Component, ...] = tuple(components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    @property
    def components(self) -> Tuple[Component, ...]:
        return self._components

    @property
    def names(self) -> List[str]:
        return [c.name for c in self._components]

    def get(self, name: str) -> Optional[Component]:
        """Find the first component with the given name."""
        for component in self._components:
            if component.name == name:
                return component
        return None
