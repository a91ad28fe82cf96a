# Smart City Signal Controller - console runner
# Builds a city, loads a traffic scenario and prints every cycle outcome

import argparse
import logging

import numpy as np

from config import DEFAULT_INTERSECTIONS, LOG_FORMAT, LOG_LEVEL, SCENARIOS
from simulator import City, CycleReport

COL = 10


def format_report(report: CycleReport) -> str:
    lines = [
        f"--- Intersection {report.intersection_id} ---",
        f"GREEN: {report.road} | Time: {report.green_time}s",
        f"{'Road':<{COL}}{'Density':<{COL}}{'Signal':<{COL}}",
    ]
    for r in report.roads:
        lines.append(f"{r.name:<{COL}}{r.density:<{COL}}{r.signal.value:<{COL}}")
    return "\n".join(lines)


def print_report(report: CycleReport):
    print()
    print(format_report(report))


def run(intersections=DEFAULT_INTERSECTIONS, ticks=1, scenario="demo", seed=None):
    city = City(intersections)
    city.populate(scenario)
    rng = np.random.default_rng(seed) if seed is not None else None

    for _ in range(ticks):
        print(f"\n=== TICK {city.t + 1} ===")
        alerts_before = city.metrics.green_wave_alerts
        city.tick(reporter=print_report)
        if city.metrics.green_wave_alerts > alerts_before:
            print("Emergency detected -> GREEN WAVE ACTIVATED")
        # fresh arrivals land between cycles
        if rng is not None:
            city.random_arrivals(rng)

    return city


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Run the intersection signal controller.")
    p.add_argument("--intersections", type=int, default=DEFAULT_INTERSECTIONS)
    p.add_argument("--ticks", type=int, default=1)
    p.add_argument("--scenario", choices=sorted(SCENARIOS), default="demo")
    p.add_argument("--seed", type=int, default=None,
                   help="enable random arrivals between ticks")
    p.add_argument("--log-level", default=LOG_LEVEL)
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)

    city = run(args.intersections, args.ticks, args.scenario, args.seed)
    m = city.metrics

    print("\n=== Simulation Results ===")
    print("Cycles run         :", m.cycles_run)
    print("Cycles skipped     :", m.cycles_skipped)
    print("Vehicles released  :", m.vehicles_released)
    print("Emergency releases :", m.emergency_releases)
    print(f"Average green time : {m.avg_green_time():.2f}s")
    return city


if __name__ == "__main__":
    main()
