"""
Mutable form state around the pure loader.

The session owns what a user edits between calculations: the unit mode, bar
weight, target and the plate rows. `calculate()` snapshots that state into an
immutable LoadingRequest, so later edits never touch an earlier result.
"""
from typing import List, Optional
from .config import PRESETS, DEFAULT_UNIT, Flags
from .models import PlateType, LoadingRequest, LoadResult
from .loader import calculate, max_load
from .utils import format_result

class LoaderSession:
    def __init__(self, unit: str = DEFAULT_UNIT, flags: Optional[Flags] = None):
        self.flags = flags or Flags()
        self.target_weight: float = 0.0
        self.set_unit(unit)

    def set_unit(self, unit: str):
        if unit not in PRESETS:
            raise ValueError(f"unknown unit {unit!r}; expected one of {sorted(PRESETS)}")
        preset = PRESETS[unit]
        self.unit = unit
        self.bar_weight = preset.bar_weight
        self.plates: List[PlateType] = [PlateType(i + 1, w, c) for i, (w, c) in enumerate(preset.plates)]
        self.next_plate_id = len(self.plates) + 1
        self.last_result: Optional[LoadResult] = None

    def _index(self, plate_id: int) -> int:
        for i, p in enumerate(self.plates):
            if p.id == plate_id:
                return i
        raise KeyError(plate_id)

    def add_plate(self, weight: float = 0, count: int = 0) -> PlateType:
        plate = PlateType(self.next_plate_id, weight, count)
        self.plates.append(plate)
        self.next_plate_id += 1
        return plate

    def remove_plate(self, plate_id: int):
        del self.plates[self._index(plate_id)]

    def update_plate(self, plate_id: int, weight: Optional[float] = None, count: Optional[int] = None) -> PlateType:
        i = self._index(plate_id)
        old = self.plates[i]
        self.plates[i] = PlateType(
            old.id,
            old.weight if weight is None else weight,
            old.count if count is None else count,
        )
        return self.plates[i]

    @property
    def max_load(self) -> float:
        return max_load(self.plates)

    def snapshot(self) -> LoadingRequest:
        return LoadingRequest(self.target_weight, self.bar_weight, self.plates)

    def calculate(self) -> LoadResult:
        self.last_result = calculate(self.snapshot(), self.flags)
        return self.last_result

    def describe(self) -> str:
        if self.last_result is None:
            return ""
        return format_result(self.last_result, self.unit)
