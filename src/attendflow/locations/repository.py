from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Location


class LocationRepository(Protocol):
    """Repository interface for Location.

    Services depend on this interface, not on the concrete store.
    """

    def list_locations(self) -> Sequence[Location]:
        raise NotImplementedError

    def get_location(self, location_id: str) -> Optional[Location]:
        raise NotImplementedError

    def add_location(self, location: Location) -> Location:
        raise NotImplementedError

    def update_location(self, location: Location) -> bool:
        raise NotImplementedError

    def delete_location(self, location_id: str) -> bool:
        raise NotImplementedError
