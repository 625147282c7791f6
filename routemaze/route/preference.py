"""User weighting of distance, time and cost when choosing a route."""

from __future__ import annotations

import re
import sys
from enum import Enum
from typing import Callable, Mapping, TextIO

MAX_COST = 100000.0
MAX_DISTANCE = 1000.0
MAX_TIME = 300.0

TRAIN_SPEED = 80.0
BUS_SPEED = 40.0
TAXI_SPEED = 60.0
TRAIN_COST = 500.0
BUS_COST = 300.0
TAXI_COST = 4500.0
TRANSFER_PENALTY = 15
WAITING_TIME = 10
MAX_PATH_LENGTH = 20
MAX_TRANSFERS = 3
DEFAULT_LOCATIONS_FILE = "data/location.csv"
DEFAULT_ROUTES_FILE = "data/route.csv"
PREFERENCES_FILE = "data/preference.json"
CONSOLE_WIDTH = 80
DIVIDER = "=" * 40

_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class Criteria(Enum):
    TIME = "time"
    DISTANCE = "distance"
    COST = "cost"
    TRANSIT = "transit"


def _validate_weight(weight: float) -> None:
    if weight < 0.0 or weight > 1.0:
        raise ValueError("Weight must be between 0 and 1")


class Preference:
    """Three weights for distance, time and cost, kept summing to one."""

    def __init__(
        self,
        distance_weight: float = 1.0 / 3,
        time_weight: float = 1.0 / 3,
        cost_weight: float = 1.0 / 3,
    ) -> None:
        self._distance = float(distance_weight)
        self._time = float(time_weight)
        self._cost = float(cost_weight)
        self.normalize_weights()

    def __repr__(self) -> str:
        return (
            f"Preference(distance_weight={self._distance!r}, "
            f"time_weight={self._time!r}, cost_weight={self._cost!r})"
        )

    @property
    def distance_weight(self) -> float:
        return self._distance

    @distance_weight.setter
    def distance_weight(self, weight: float) -> None:
        _validate_weight(weight)
        self._distance = float(weight)
        self.normalize_weights()

    @property
    def time_weight(self) -> float:
        return self._time

    @time_weight.setter
    def time_weight(self, weight: float) -> None:
        _validate_weight(weight)
        self._time = float(weight)
        self.normalize_weights()

    @property
    def cost_weight(self) -> float:
        return self._cost

    @cost_weight.setter
    def cost_weight(self, weight: float) -> None:
        _validate_weight(weight)
        self._cost = float(weight)
        self.normalize_weights()

    def calculate_score(self, distance: float, time: float, cost: float) -> float:
        """Return the weighted sum of the three path totals."""
        return self._distance * distance + self._time * time + self._cost * cost

    def normalize_weights(self) -> None:
        """Scale the weights so they sum to one, unless their sum is not positive."""
        total = self._distance + self._time + self._cost
        if total > 0:
            self._distance /= total
            self._time /= total
            self._cost /= total


def _fmt(value: float) -> str:
    return f"{value:g}"


class MultiCriteria:
    """Named weights over any number of criteria, kept in key order."""

    def __init__(self) -> None:
        self._weights: dict[str, float] = {
            "cost": 0.30,
            "distance": 0.25,
            "time": 0.35,
            "transfers": 0.10,
        }

    @property
    def weights(self) -> dict[str, float]:
        return dict(self._weights)

    def prompt_weights(
        self,
        input_func: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> str:
        """Ask for a new weight per criterion; normalise if they do not sum to one."""
        out = output if output is not None else sys.stdout
        out.write("\n== Masukkan Bobot Preferensi ==\n")
        out.write("Total bobot harus bernilai 1.0\n")
        total = 0.0
        for name, weight in list(self._weights.items()):
            value = float(input_func(f"Bobot untuk {name} (current: {_fmt(weight)}): "))
            self._weights[name] = value
            total += value
        if abs(total - 1.0) > 1e-6:
            out.write("Total bobot tidak sama dengan 1.0, normalisasi dilakukan\n")
            self._weights = {name: w / total for name, w in self._weights.items()}
        return "multi"

    def load_from_file(self, filename: str) -> None:
        """Replace the weights with ``name,value`` lines from a file, then normalise."""
        loaded: dict[str, float] = {}
        with open(filename, encoding="utf-8") as handle:
            for line in handle:
                line = line.rstrip("\n")
                key, sep, rest = line.partition(",")
                if not sep:
                    continue
                match = _NUMBER_PREFIX.match(rest)
                if match is None:
                    continue
                loaded[key] = float(match.group(1))
        total = sum(loaded.values())
        if total > 0:
            loaded = {key: value / total for key, value in loaded.items()}
        self._weights = dict(sorted(loaded.items()))

    def calculate_score(self, attributes: Mapping[str, float]) -> float:
        """Return the weighted sum over the criteria present in ``attributes``."""
        return sum(
            weight * attributes[name]
            for name, weight in self._weights.items()
            if name in attributes
        )