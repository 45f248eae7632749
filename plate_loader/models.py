import math
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

@dataclass(frozen=True)
class PlateType:
    id: int
    weight: float
    count: int   # total across both sides
    def __post_init__(self):
        if not (math.isfinite(self.weight) and math.isfinite(self.count)):
            raise ValueError(f"plate weight and count must be finite, got {self.weight!r} x {self.count!r}")
        if isinstance(self.count, bool) or int(self.count) != self.count:
            raise ValueError(f"plate count must be a whole number, got {self.count!r}")
        object.__setattr__(self, "count", int(self.count))
        object.__setattr__(self, "weight", float(self.weight))

    @property
    def usable(self) -> bool:
        return self.weight > 0 and self.count > 0

@dataclass(frozen=True)
class LoadingRequest:
    target_weight: float
    bar_weight: float
    inventory: Tuple[PlateType, ...] = ()
    def __post_init__(self):
        # snapshot whatever sequence the caller handed in
        object.__setattr__(self, "inventory", tuple(self.inventory))

@dataclass(frozen=True)
class LoadingPlan:
    """Plates to put on ONE side of the bar; the other side mirrors it."""
    per_side: Dict[float, int]
    target_weight: float
    bar_weight: float
    weight_from_plates: float
    weight_per_side: float
    strategy: str = "greedy"

    def items(self):
        return sorted(self.per_side.items(), key=lambda kv: -kv[0])

    @property
    def plate_count(self) -> int:
        return sum(self.per_side.values())

    @property
    def loaded_weight(self) -> float:
        return self.bar_weight + 2.0 * sum(w * n for w, n in self.per_side.items())


@dataclass(frozen=True)
class LoaderError:
    code = "error"
    @property
    def message(self) -> str:
        return self.code

@dataclass(frozen=True)
class InvalidInput(LoaderError):
    code = "invalid_input"
    @property
    def message(self):
        return "Please enter valid positive numbers for target and barbell weight."

@dataclass(frozen=True)
class TargetBelowBar(LoaderError):
    code = "target_below_bar"
    @property
    def message(self):
        return "Target weight cannot be less than barbell weight."

@dataclass(frozen=True)
class InexactLoad(LoaderError):
    remaining_per_side: float = 0.0
    code = "inexact_load"
    @property
    def message(self):
        return f"Cannot precisely load the target weight with available plates. Remaining weight per side: {self.remaining_per_side:.2f}."


@dataclass(frozen=True)
class LoadResult:
    plan: Optional[LoadingPlan] = None
    error: Optional[LoaderError] = field(default=None)
    request: Optional[LoadingRequest] = field(default=None, repr=False)

    @property
    def ok(self) -> bool:
        return self.error is None and self.plan is not None
