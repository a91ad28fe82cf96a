ROAD_NAMES = ["North", "South", "East", "West"]   # evaluation order
DEFAULT_INTERSECTIONS = 3

# Road score = density*W + wait*W + bonuses
DENSITY_WEIGHT = 0.4
WAIT_WEIGHT = 0.3
EMERGENCY_BONUS = 50
PEDESTRIAN_BONUS = 5

# Green duration (seconds)
BASE_GREEN = 20
GREEN_PER_VEHICLE = 2
EMERGENCY_GREEN = 30

# Vehicle priority weights (not used by the road score)
EMERGENCY_PRIORITY = 100
NORMAL_PRIORITY = 10

# Random arrivals (probability per road per tick)
ARRIVAL_RATE = 0.35
EMERGENCY_RATE = 0.02

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = "WARNING"

# Scenario entries: (intersection_id, road, kind, value)
# kind: "vehicle" (value = "NORMAL" | "EMERGENCY"), "ped", "accident" (value = bool)
SCENARIOS = {
    "empty": [],
    "demo": [
        (1, "South", "vehicle", "EMERGENCY"),
        (2, "East", "vehicle", "NORMAL"),
        (2, "East", "vehicle", "NORMAL"),
        (3, "North", "vehicle", "NORMAL"),
        (3, "North", "ped", None),
    ],
    "rush_hour": [
        (1, "North", "vehicle", "NORMAL"),
        (1, "North", "vehicle", "NORMAL"),
        (1, "North", "vehicle", "NORMAL"),
        (1, "South", "vehicle", "NORMAL"),
        (1, "South", "vehicle", "NORMAL"),
        (2, "East", "vehicle", "NORMAL"),
        (2, "West", "vehicle", "NORMAL"),
        (2, "West", "vehicle", "NORMAL"),
        (3, "North", "vehicle", "NORMAL"),
        (3, "East", "ped", None),
    ],
    "accident_south": [
        (1, "South", "vehicle", "EMERGENCY"),
        (1, "South", "accident", True),
        (1, "West", "vehicle", "NORMAL"),
        (2, "South", "accident", True),
        (2, "South", "vehicle", "NORMAL"),
        (2, "South", "vehicle", "NORMAL"),
        (2, "North", "vehicle", "NORMAL"),
    ],
    "gridlock": [
        (iid, road, "accident", True)
        for iid in (1, 2, 3)
        for road in ROAD_NAMES
    ],
}
