import argparse, os, sys
from .config import PRESETS, DEFAULT_UNIT, Flags
from .models import PlateType, LoadingRequest
from .loader import calculate, max_load
from .utils import format_result, plan_report, load_plates_csv, save_plan_csv, save_report_json, draw_bar

def main(argv=None):
    ap = argparse.ArgumentParser(prog="plate-loader", description="Plates per side for a barbell target weight.")
    ap.add_argument("--target", type=float, required=True)
    ap.add_argument("--unit", choices=sorted(PRESETS), default=DEFAULT_UNIT)
    ap.add_argument("--bar", type=float, default=None, help="bar weight (defaults to the unit preset)")
    ap.add_argument("--plates", default=None, help="CSV with weight,count columns (defaults to the unit preset)")
    ap.add_argument("--exact", action="store_true", help="fall back to CP-SAT when the greedy pass fails")
    ap.add_argument("--out-dir", default=None)
    ap.add_argument("--plot", action="store_true")
    args = ap.parse_args(argv)

    preset = PRESETS[args.unit]
    bar = preset.bar_weight if args.bar is None else args.bar
    if args.plates:
        try:
            plates = load_plates_csv(args.plates)
        except (OSError, ValueError) as e:
            print(f"Cannot read plates from {args.plates}: {e}", file=sys.stderr)
            return 2
        print(f"[INFO] Loaded {len(plates)} plate types from {args.plates}")
    else:
        plates = [PlateType(i + 1, w, c) for i, (w, c) in enumerate(preset.plates)]
    print(f"[INFO] Bar: {bar:g}{args.unit} | Plate stock: {max_load(plates):g}{args.unit}")

    result = calculate(LoadingRequest(args.target, bar, plates), Flags(exact_fallback=args.exact))
    print(format_result(result, args.unit))

    if args.out_dir:
        os.makedirs(args.out_dir, exist_ok=True)
        save_report_json(plan_report(result), os.path.join(args.out_dir, "report.json"))
        written = ["report.json"]
        if result.ok:
            save_plan_csv(result.plan, os.path.join(args.out_dir, "plan.csv"))
            written.append("plan.csv")
            if args.plot:
                draw_bar(result.plan, os.path.join(args.out_dir, "bar.png"), unit=args.unit)
                written.append("bar.png")
        print(f"Wrote: {', '.join(written)} to {args.out_dir}")
    return 0 if result.ok else 1

if __name__ == "__main__":
    sys.exit(main())
