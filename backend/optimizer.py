from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from config import (
    DENSITY_WEIGHT,
    WAIT_WEIGHT,
    EMERGENCY_BONUS,
    PEDESTRIAN_BONUS,
    BASE_GREEN,
    GREEN_PER_VEHICLE,
    EMERGENCY_GREEN,
)

if TYPE_CHECKING:
    from simulator import Road

logger = logging.getLogger(__name__)


class SignalController:
    """
    Stateless green-road strategy. Holds no fields, so one instance can be
    shared by every intersection. Override `score` to change the ranking.
    """

    __slots__ = ()

    def score(self, road: Road) -> float:
        return (
            road.density * DENSITY_WEIGHT
            + road.wait_time * WAIT_WEIGHT
            + (EMERGENCY_BONUS if road.has_emergency else 0)
            + (PEDESTRIAN_BONUS if road.pedestrian else 0)
        )

    def select_green_road(self, roads: Iterable[Road]) -> Optional[Road]:
        """
        Returns the road with the highest score, or None when every road
        has an accident.

        - Accident roads are skipped without scoring.
        - Only a strictly greater score replaces the current best, so on a
          tie the earlier road keeps the green.
        """
        best_score = -1.0
        selected: Optional[Road] = None

        for road in roads:
            if road.accident:
                logger.debug("skip %s: accident", road.name)
                continue

            s = self.score(road)
            logger.debug("score %s = %.2f", road.name, s)
            if s > best_score:
                best_score = s
                selected = road

        return selected

    def calculate_green_time(self, road: Road) -> int:
        # read before the road is reset; no upper cap
        return (
            BASE_GREEN
            + road.density * GREEN_PER_VEHICLE
            + (EMERGENCY_GREEN if road.has_emergency else 0)
        )
