"""
Debug runner: load plates from a CSV and trace the greedy pass step by step.
Run:
    python3 run_loader_debug.py plates.csv 100 20
"""
import sys
from plate_loader.utils import load_plates_csv, format_result
from plate_loader.loader import normalize_inventory, greedy_plan, calculate
from plate_loader.models import LoadingRequest

if len(sys.argv) < 4:
    print('Usage: python3 run_loader_debug.py <plates.csv> <target> <bar>')
    sys.exit(1)

path, target, bar = sys.argv[1], float(sys.argv[2]), float(sys.argv[3])
try:
    plates = load_plates_csv(path)
except (OSError, ValueError) as e:
    print('Cannot read plates:', e, file=sys.stderr)
    sys.exit(2)
print(f'Loaded {len(plates)} plate rows from {path}')

stock = normalize_inventory(plates)
print('Usable stock (weight, total count):', stock)
remaining = (target - bar) / 2.0
print(f'Weight per side: {remaining:g}')
for weight, count in stock:
    # one denomination at a time so the residual can be followed
    used, remaining = greedy_plan(remaining, [(weight, count)])
    print(f'[PLATE] {weight:g} x{count}: use {used.get(weight, 0)} per side, remaining {remaining:.4f}')

print()
print(format_result(calculate(LoadingRequest(target, bar, plates)), ''))
