from typing import Callable, Dict, Iterable, List, Optional

from world_clock_service.schemas.city import City
from world_clock_service.schemas.snapshot import BoardOut, DisplaySnapshot
from world_clock_service.services.display_state import build_snapshot


class SnapshotBoard:
    """
    The city handles refreshed by the shared tick.

    Each ``tick()`` reads corrected now once and rebuilds every snapshot in
    a single pass; the previous set is replaced wholesale.
    """

    def __init__(
        self,
        cities: Iterable[City],
        viewer_zone_id: str,
        now: Callable[[], int],
    ) -> None:
        self._cities: Dict[str, City] = {city.city_id: city for city in cities}
        self.viewer_zone_id = viewer_zone_id
        self._now = now
        self._snapshots: Dict[str, DisplaySnapshot] = {}
        self.last_tick_at: Optional[int] = None
        self.tick_count = 0

    @property
    def cities(self) -> List[City]:
        return list(self._cities.values())

    def get_city(self, city_id: str) -> Optional[City]:
        return self._cities.get(city_id)

    def tick(self) -> List[DisplaySnapshot]:
        now = self._now()
        self._snapshots = {
            city_id: build_snapshot(city, self.viewer_zone_id, now)
            for city_id, city in self._cities.items()
        }
        self.last_tick_at = now
        self.tick_count += 1
        return list(self._snapshots.values())

    def snapshots(self) -> List[DisplaySnapshot]:
        return list(self._snapshots.values())

    def to_out(self) -> BoardOut:
        return BoardOut(
            viewer_zone_id=self.viewer_zone_id,
            tick_count=self.tick_count,
            last_tick_at=self.last_tick_at,
            snapshots=self.snapshots(),
        )
