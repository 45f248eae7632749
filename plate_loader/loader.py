import math
from typing import Dict, Iterable, List, Optional, Tuple
from .models import (
    PlateType, LoadingRequest, LoadingPlan, LoadResult,
    InvalidInput, TargetBelowBar, InexactLoad,
)
from .config import Flags, EPS, TOLERANCE

def max_load(inventory: Iterable[PlateType]) -> float:
    # raw rows, zero/negative entries included
    return sum(p.weight * p.count for p in inventory)

def normalize_inventory(inventory: Iterable[PlateType]) -> List[Tuple[float, int]]:
    """Usable (weight, total_count) pairs, duplicate weights summed, heaviest first."""
    stock: Dict[float, int] = {}
    for p in inventory:
        if not p.usable:
            continue
        stock[p.weight] = stock.get(p.weight, 0) + p.count
    # sorted() is stable; keys are unique after the merge so input order cannot leak through
    return sorted(stock.items(), key=lambda wc: -wc[0])

def greedy_plan(weight_per_side: float, stock: List[Tuple[float, int]]):
    remaining = weight_per_side
    used: Dict[float, int] = {}
    for weight, count in stock:
        if remaining + EPS < weight:
            continue
        by_weight = int(math.floor((remaining + EPS) / weight))
        by_stock = count // 2   # the other half goes on the opposite side
        use = min(by_weight, by_stock)
        if use > 0:
            used[weight] = use
            remaining -= use * weight
    return used, remaining

def calculate(request: LoadingRequest, flags: Optional[Flags] = None) -> LoadResult:
    flags = flags or Flags()
    target, bar = request.target_weight, request.bar_weight
    if not (target > 0 and bar > 0) or not (math.isfinite(target) and math.isfinite(bar)):
        return LoadResult(error=InvalidInput(), request=request)
    if target < bar:
        return LoadResult(error=TargetBelowBar(), request=request)

    weight_from_plates = target - bar
    weight_per_side = weight_from_plates / 2.0
    stock = normalize_inventory(request.inventory)

    used, remaining = greedy_plan(weight_per_side, stock)
    strategy = "greedy"
    if abs(remaining) > TOLERANCE:
        exact = None
        if flags.exact_fallback:
            from .selector import exact_plan
            exact = exact_plan(weight_per_side, stock)
        if exact is None:
            return LoadResult(error=InexactLoad(remaining_per_side=remaining), request=request)
        used, strategy = exact, "exact"

    return LoadResult(plan=LoadingPlan(
        per_side=dict(sorted(used.items(), key=lambda wc: -wc[0])),
        target_weight=target,
        bar_weight=bar,
        weight_from_plates=weight_from_plates,
        weight_per_side=weight_per_side,
        strategy=strategy,
    ), request=request)
