"""
Save as `bench_targets.py` at project root and run:
    python3 bench_targets.py

This script:
- Sweeps every reachable target (preset step) for both unit presets.
- Runs the greedy loader, then the loader with the CP-SAT fallback enabled.
- Counts targets the greedy pass misses and how many of those the fallback recovers.
- Writes a JSON summary per unit into `bench_results/`.
"""
import os
import numpy as np

from plate_loader.config import PRESETS, Flags
from plate_loader.models import PlateType, LoadingRequest
from plate_loader.loader import calculate, max_load
from plate_loader.utils import save_report_json

STEPS = {"kg": 0.5, "lb": 1.0}

os.makedirs("bench_results", exist_ok=True)

for unit, preset in PRESETS.items():
    plates = [PlateType(i + 1, w, c) for i, (w, c) in enumerate(preset.plates)]
    top = preset.bar_weight + max_load(plates)
    targets = np.arange(preset.bar_weight, top + 1e-9, STEPS[unit])
    print(f"\n=== {unit}: bar {preset.bar_weight:g}, {len(targets)} targets up to {top:g} ===")

    greedy_ok, exact_ok, recovered = 0, 0, []
    for t in targets:
        req = LoadingRequest(float(t), preset.bar_weight, plates)
        g = calculate(req)
        e = calculate(req, Flags(exact_fallback=True))
        greedy_ok += g.ok; exact_ok += e.ok
        if e.ok and not g.ok:
            recovered.append(float(t))

    print(f"greedy: {greedy_ok}/{len(targets)} | with fallback: {exact_ok}/{len(targets)}")
    if recovered:
        print(f"recovered by fallback: {recovered[:10]}{' ...' if len(recovered) > 10 else ''}")
    save_report_json({
        "targets": len(targets),
        "greedy_ok": greedy_ok,
        "exact_ok": exact_ok,
        "recovered": recovered,
    }, os.path.join("bench_results", f"{unit}_sweep.json"))

print('\nDone. Results saved under bench_results/.')
