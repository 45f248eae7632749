"""Exact fallback strategy (CP-SAT) and its wiring into the loader."""

import pytest

from plate_loader.config import Flags, TOLERANCE
from plate_loader.loader import calculate
from plate_loader.models import PlateType, LoadingRequest, InexactLoad
from plate_loader.selector import exact_plan

EXACT = Flags(exact_fallback=True)


def _req(target, bar, *pairs):
    return LoadingRequest(target, bar, [PlateType(i + 1, w, c) for i, (w, c) in enumerate(pairs)])


def test_exact_finds_what_greedy_misses():
    assert exact_plan(6, [(5, 2), (3, 4)]) == {3: 2}


def test_exact_prefers_fewest_plates():
    assert exact_plan(10, [(5, 4), (2.5, 8)]) == {5: 2}


def test_exact_respects_half_stock():
    # only one 3 per side, so 6 cannot be made
    assert exact_plan(6, [(5, 2), (3, 2)]) is None


def test_exact_infeasible_and_empty():
    assert exact_plan(10, [(7, 10)]) is None
    assert exact_plan(10, []) is None
    assert exact_plan(0, []) == {}


def test_fallback_off_by_default():
    r = calculate(_req(32, 20, (5, 2), (3, 4)))
    assert isinstance(r.error, InexactLoad)


def test_fallback_recovers_plan():
    r = calculate(_req(32, 20, (5, 2), (3, 4)), EXACT)
    assert r.ok
    assert r.plan.per_side == {3: 2}
    assert r.plan.strategy == "exact"
    assert r.plan.loaded_weight == pytest.approx(32)


def test_fallback_keeps_greedy_success():
    r = calculate(_req(40, 20, (6, 100), (4, 100)), EXACT)
    assert r.plan.per_side == {6: 1, 4: 1}
    assert r.plan.strategy == "greedy"


def test_fallback_failure_reports_greedy_residual():
    r = calculate(_req(40, 20, (7, 10)), EXACT)
    assert isinstance(r.error, InexactLoad)
    assert r.error.remaining_per_side == pytest.approx(3)


def test_exact_uses_all_decimal_places():
    # 100 x 1.0004 rounds to 100 at three decimals but is 0.04 heavy in real units
    assert exact_plan(100, [(1.0004, 2000)]) is None
    assert exact_plan(100.04, [(1.0004, 2000)]) == {1.0004: 100}


def test_fallback_plan_stays_within_tolerance():
    r = calculate(_req(220, 20, (1.0004, 2000)), EXACT)
    assert isinstance(r.error, InexactLoad)
    r = calculate(_req(32.0024, 20, (5.0002, 2), (3.0006, 4)), EXACT)
    assert r.ok and r.plan.strategy == "exact"
    assert r.plan.per_side == {3.0006: 2}
    assert abs(r.plan.loaded_weight - 32.0024) <= 2 * TOLERANCE
