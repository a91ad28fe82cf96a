# simulator.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

import numpy as np
from pydantic import BaseModel

from config import (
    ROAD_NAMES,
    DEFAULT_INTERSECTIONS,
    EMERGENCY_PRIORITY,
    NORMAL_PRIORITY,
    ARRIVAL_RATE,
    EMERGENCY_RATE,
    SCENARIOS,
)
from metrics import Metrics
from optimizer import SignalController

logger = logging.getLogger(__name__)


class SignalState(str, Enum):
    RED = "RED"
    YELLOW = "YELLOW"   # defined, never assigned by the cycle
    GREEN = "GREEN"


class VehicleType(str, Enum):
    NORMAL = "NORMAL"
    EMERGENCY = "EMERGENCY"


class SystemMode(str, Enum):
    AUTOMATIC = "AUTOMATIC"
    MANUAL = "MANUAL"
    EMERGENCY_OVERRIDE = "EMERGENCY_OVERRIDE"


@dataclass(frozen=True)
class Vehicle:
    id: int
    type: VehicleType = VehicleType.NORMAL

    @property
    def priority(self) -> int:
        return EMERGENCY_PRIORITY if self.type == VehicleType.EMERGENCY else NORMAL_PRIORITY

    @property
    def is_emergency(self) -> bool:
        return self.type == VehicleType.EMERGENCY


class RoadSnapshot(BaseModel):
    name: str
    density: int
    signal: SignalState


class CycleReport(BaseModel):
    intersection_id: int
    road: str
    green_time: int
    emergency: bool = False
    roads: List[RoadSnapshot]

    @property
    def released(self) -> int:
        return next(r.density for r in self.roads if r.name == self.road)


Reporter = Callable[[CycleReport], None]


class Road:
    def __init__(self, name: str):
        self.name = name
        self.vehicles: List[Vehicle] = []
        self.accident = False
        self.pedestrian = False
        self.wait_time = 0
        self.signal = SignalState.RED

    @property
    def density(self) -> int:
        return len(self.vehicles)

    @property
    def has_emergency(self) -> bool:
        return any(v.is_emergency for v in self.vehicles)

    def add_vehicle(self, vehicle: Vehicle):
        self.vehicles.append(vehicle)

    def set_accident(self, status: bool):
        self.accident = bool(status)

    def request_pedestrian(self):
        self.pedestrian = True

    def increment_wait(self):
        self.wait_time += 1

    def reset_cycle(self):
        # accident flag and signal stay as they are
        self.vehicles.clear()
        self.pedestrian = False
        self.wait_time = 0

    def snapshot(self) -> Dict:
        return {
            "name": self.name,
            "density": self.density,
            "wait_time": self.wait_time,
            "accident": self.accident,
            "pedestrian": self.pedestrian,
            "emergency": self.has_emergency,
            "signal": self.signal.value,
        }


class Intersection:
    def __init__(self, iid: int, controller: Optional[SignalController] = None):
        self.id = iid
        self.controller = controller or SignalController()
        self.roads: List[Road] = [Road(name) for name in ROAD_NAMES]
        self._by_name: Dict[str, Road] = {r.name: r for r in self.roads}

    def road(self, name: str) -> Road:
        return self._by_name[name]

    def add_vehicle(self, road: str, vehicle: Vehicle):
        self.road(road).add_vehicle(vehicle)

    def request_pedestrian(self, road: str):
        self.road(road).request_pedestrian()

    def set_accident(self, road: str, status: bool):
        self.road(road).set_accident(status)

    def has_emergency_vehicle(self) -> bool:
        return any(r.has_emergency for r in self.roads)

    def simulate_cycle(self, reporter: Optional[Reporter] = None) -> Optional[CycleReport]:
        """
        Run one decision cycle. Returns None when no road could be selected;
        in that case only the wait counters have moved and every signal keeps
        its previous state.
        """
        for r in self.roads:
            r.increment_wait()

        green = self.controller.select_green_road(self.roads)
        if green is None:
            logger.info("intersection %s: no selectable road, cycle skipped", self.id)
            return None

        for r in self.roads:
            r.signal = SignalState.RED
        green.signal = SignalState.GREEN

        green_time = self.controller.calculate_green_time(green)

        report = CycleReport(
            intersection_id=self.id,
            road=green.name,
            green_time=green_time,
            emergency=green.has_emergency,
            roads=[
                RoadSnapshot(name=r.name, density=r.density, signal=r.signal)
                for r in self.roads
            ],
        )
        logger.info("intersection %s: GREEN %s for %ss", self.id, green.name, green_time)
        if reporter is not None:
            reporter(report)

        green.reset_cycle()
        return report

    def snapshot(self) -> Dict:
        return {
            "id": self.id,
            "emergency": self.has_emergency_vehicle(),
            "roads": [r.snapshot() for r in self.roads],
        }


class CentralServer:
    def monitor(self, intersections: List[Intersection]) -> List[int]:
        alerts = []
        for inter in intersections:
            if inter.has_emergency_vehicle():
                logger.warning(
                    "Emergency detected at intersection %s -> GREEN WAVE ACTIVATED", inter.id
                )
                alerts.append(inter.id)
        return alerts


class City:
    def __init__(self, count: int = DEFAULT_INTERSECTIONS, controller: Optional[SignalController] = None):
        # one stateless controller shared by every intersection
        self.controller = controller or SignalController()
        self.intersections: List[Intersection] = [
            Intersection(iid, self.controller) for iid in range(1, count + 1)
        ]
        self.server = CentralServer()
        self.mode = SystemMode.AUTOMATIC
        self.metrics = Metrics()
        self.t = 0
        self._next_vehicle_id = 1

    def intersection(self, iid: int) -> Intersection:
        for inter in self.intersections:
            if inter.id == iid:
                return inter
        raise KeyError(iid)

    def new_vehicle(self, vtype: VehicleType = VehicleType.NORMAL) -> Vehicle:
        v = Vehicle(self._next_vehicle_id, vtype)
        self._next_vehicle_id += 1
        return v

    def populate(self, scenario: str = "demo"):
        known = {inter.id: inter for inter in self.intersections}
        for iid, road, kind, value in SCENARIOS[scenario]:
            inter = known.get(iid)
            if inter is None:
                continue

            if kind == "vehicle":
                inter.add_vehicle(road, self.new_vehicle(VehicleType(value)))
            elif kind == "ped":
                inter.request_pedestrian(road)
            elif kind == "accident":
                inter.set_accident(road, bool(value))

    def random_arrivals(self, rng: np.random.Generator):
        for inter in self.intersections:
            for r in inter.roads:
                if rng.random() < ARRIVAL_RATE:
                    vtype = VehicleType.EMERGENCY if rng.random() < EMERGENCY_RATE else VehicleType.NORMAL
                    r.add_vehicle(self.new_vehicle(vtype))

    def tick(self, reporter: Optional[Reporter] = None) -> List[CycleReport]:
        self.t += 1
        alerts = self.server.monitor(self.intersections)

        reports = []
        skipped = 0
        for inter in self.intersections:
            report = inter.simulate_cycle(reporter)
            if report is None:
                skipped += 1
            else:
                reports.append(report)

        self.metrics.record_tick(t=self.t, reports=reports, skipped=skipped, alerts=len(alerts))
        return reports

    def run(self, ticks: int, rng: Optional[np.random.Generator] = None,
            reporter: Optional[Reporter] = None) -> List[CycleReport]:
        out = []
        for _ in range(ticks):
            if rng is not None:
                self.random_arrivals(rng)
            out.extend(self.tick(reporter))
        return out

    def snapshot(self) -> Dict:
        return {
            "t": self.t,
            "mode": self.mode.value,
            "metrics": {
                "cycles_run": self.metrics.cycles_run,
                "cycles_skipped": self.metrics.cycles_skipped,
                "avg_green": round(self.metrics.avg_green_time(), 2),
                "vehicles_released": self.metrics.vehicles_released,
                "emergency_releases": self.metrics.emergency_releases,
                "green_wave_alerts": self.metrics.green_wave_alerts,
            },
            "intersections": [inter.snapshot() for inter in self.intersections],
        }
