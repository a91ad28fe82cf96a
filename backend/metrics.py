from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from simulator import CycleReport


@dataclass
class Metrics:
    cycles_run: int = 0
    cycles_skipped: int = 0
    total_green_time: int = 0
    vehicles_released: int = 0
    emergency_releases: int = 0
    green_wave_alerts: int = 0

    # time series per tick
    t_series: List[int] = field(default_factory=list)
    green_series: List[int] = field(default_factory=list)
    skipped_series: List[int] = field(default_factory=list)

    def record_tick(self, t: int, reports: List[CycleReport], skipped: int, alerts: int = 0):
        green_this_tick = 0
        for report in reports:
            self.cycles_run += 1
            green_this_tick += report.green_time
            self.vehicles_released += report.released
            if report.emergency:
                self.emergency_releases += 1

        self.total_green_time += green_this_tick
        self.cycles_skipped += skipped
        self.green_wave_alerts += alerts

        self.t_series.append(t)
        self.green_series.append(green_this_tick)
        self.skipped_series.append(skipped)

    def avg_green_time(self) -> float:
        if self.cycles_run <= 0:
            return 0.0
        return self.total_green_time / self.cycles_run
