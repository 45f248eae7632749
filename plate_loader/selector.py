from typing import Dict, List, Optional, Tuple
from ortools.sat.python import cp_model
from .config import WEIGHT_SCALE, MAX_WEIGHT_DECIMALS, TOLERANCE, EXACT_TIME_LIMIT_S, EXACT_SEED

def _scale_for(values) -> int:
    # smallest power of ten that makes every value integral, never below WEIGHT_SCALE
    scale = WEIGHT_SCALE
    for v in values:
        for k in range(MAX_WEIGHT_DECIMALS + 1):
            if float(round(v * 10 ** k, 9)).is_integer():
                break
        scale = max(scale, 10 ** k)
    return scale

def exact_plan(weight_per_side: float, stock: List[Tuple[float, int]]) -> Optional[Dict[float, int]]:
    """
    Exact per-side decomposition with CP-SAT.

    stock is (weight, total_count) heaviest first, as produced by
    loader.normalize_inventory. Returns {weight: per_side_count} using the fewest
    plates (heavier plates win ties), or None when no combination lands within
    TOLERANCE of weight_per_side.
    """
    if weight_per_side <= TOLERANCE:
        return {}
    stock = [(w, c // 2) for w, c in stock if c // 2 > 0 and w > 0]
    if not stock:
        return None

    scale = _scale_for([w for w, _ in stock] + [weight_per_side])
    target = int(round(weight_per_side * scale))
    slack = int(round(TOLERANCE * scale))

    model = cp_model.CpModel()
    xs = []
    for i, (w, cap) in enumerate(stock):
        xs.append(model.NewIntVar(0, cap, f"n_{i}"))
    total = sum(int(round(w * scale)) * x for (w, _), x in zip(stock, xs))
    model.AddLinearConstraint(total, target - slack, target + slack)

    # fewest plates first; among equal counts prefer the heavier denominations
    per_plate = len(stock) * sum(cap for _, cap in stock) + 1
    model.Minimize(sum(per_plate * x for x in xs) + sum(rank * x for rank, x in enumerate(xs)))

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = EXACT_TIME_LIMIT_S
    solver.parameters.num_workers = 1
    solver.parameters.random_seed = EXACT_SEED
    status = solver.Solve(model)
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        return None
    plan = {w: int(solver.Value(x)) for (w, _), x in zip(stock, xs) if solver.Value(x) > 0}
    # weights with more than MAX_WEIGHT_DECIMALS places are still rounded; check in real units
    if abs(sum(w * n for w, n in plan.items()) - weight_per_side) > TOLERANCE:
        return None
    return plan
