"""Charging stations — FIFO admission queue per station, plus the station registry.

Each station has exactly one charger.  Vehicles queue in arrival order and
only the vehicle at the front of the queue charges; every other member is
waiting.  No overtaking, no priority.

The registry keeps stations in registration order.  ``lowest_count`` is the
fleet's only load-balancing policy: a vehicle that needs to charge joins the
station with the fewest occupants (queued + charging), ties going to the
first station registered.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class ChargingStation:
    """One charger and its queue of vehicle ids.

    The queue and the membership set are always in sync; a vehicle id appears
    at most once.
    """

    def __init__(self, station_id: int) -> None:
        self._id = station_id
        self._queue: deque[int] = deque()
        self._ids: set[int] = set()

    @property
    def id(self) -> int:
        return self._id

    def empty(self) -> bool:
        return not self._queue

    def count(self) -> int:
        """Vehicles at this station, queued or charging."""
        return len(self._queue)

    def exists(self, vehicle_id: int) -> bool:
        return vehicle_id in self._ids

    def front(self) -> int | None:
        """Id of the vehicle currently charging, or None if the station is empty."""
        return self._queue[0] if self._queue else None

    def enqueue(self, vehicle_id: int) -> bool:
        """Append a vehicle at the back of the queue.

        Returns False (and changes nothing) if the vehicle is already queued.
        """
        if vehicle_id in self._ids:
            return False
        self._ids.add(vehicle_id)
        self._queue.append(vehicle_id)
        return True

    def dequeue(self) -> bool:
        """Remove the vehicle at the front.  Returns False if the station is empty."""
        if not self._queue:
            return False
        self._ids.discard(self._queue.popleft())
        return True

    def __repr__(self) -> str:
        return f"ChargingStation(id={self._id}, queue={list(self._queue)})"


class ChargingStations:
    """Registry of charging stations keyed by id, in registration order."""

    def __init__(self) -> None:
        self._stations: dict[int, ChargingStation] = {}

    @classmethod
    def with_count(cls, count: int) -> ChargingStations:
        """Registry holding ``count`` empty stations with ids 0 … count-1."""
        stations = cls()
        for station_id in range(max(count, 0)):
            stations.insert(ChargingStation(station_id))
        return stations

    def insert(self, station: ChargingStation) -> bool:
        """Register a station.  Returns False if its id is already registered."""
        if station.id in self._stations:
            return False
        self._stations[station.id] = station
        return True

    def at(self, station_id: int) -> ChargingStation | None:
        return self._stations.get(station_id)

    def lowest_count(self) -> ChargingStation | None:
        """Station with the fewest occupants; first registered wins ties.

        None when the registry is empty.
        """
        best: ChargingStation | None = None
        for station in self._stations.values():
            if best is None or station.count() < best.count():
                best = station
        return best

    def empty(self) -> bool:
        return not self._stations

    def __len__(self) -> int:
        return len(self._stations)

    def __iter__(self) -> Iterator[ChargingStation]:
        return iter(self._stations.values())
