import csv, json
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
from .models import PlateType, LoadResult, InexactLoad

# heavier plates get the darker shade
PLATE_COLORS = [
    (0.80, 0.10, 0.10), (0.10, 0.30, 0.85), (0.95, 0.80, 0.10),
    (0.10, 0.60, 0.20), (0.95, 0.95, 0.95), (0.20, 0.20, 0.20),
]

def _num(x):
    x = round(float(x), 6)
    return str(int(x)) if x.is_integer() else repr(x)

def format_result(result: LoadResult, unit: str) -> str:
    if not result.ok:
        err = result.error
        if isinstance(err, InexactLoad) and result.request is not None:
            return (f"Cannot precisely load {_num(result.request.target_weight)}{unit} with available plates. "
                    f"Remaining weight per side: {err.remaining_per_side:.2f}{unit}.")
        return err.message
    plan = result.plan
    lines = [
        f"Calculation for {_num(plan.target_weight)}{unit}:",
        f"{_num(plan.target_weight)}{unit} - {_num(plan.bar_weight)}{unit} (barbell) = {_num(plan.weight_from_plates)}{unit} of weights",
        f"{_num(plan.weight_from_plates)}{unit} / 2 sides = {_num(plan.weight_per_side)}{unit} per side",
        "Plates needed per side:",
    ]
    if not plan.per_side:
        lines.append("No plates needed (target weight equals barbell weight).")
    for w, n in plan.items():
        lines.append(f"  {n}x{_num(w)}{unit}")
    return "\n".join(lines)

def plan_report(result: LoadResult) -> dict:
    rep = {"ok": result.ok}
    if not result.ok:
        rep["error"] = result.error.code
        rep["message"] = result.error.message
        if isinstance(result.error, InexactLoad):
            rep["remaining_per_side"] = round(result.error.remaining_per_side, 4)
        return rep
    p = result.plan
    rep.update({
        "strategy": p.strategy,
        "target_weight": p.target_weight,
        "bar_weight": p.bar_weight,
        "weight_from_plates": p.weight_from_plates,
        "weight_per_side": p.weight_per_side,
        "plates_per_side": [{"weight": w, "count": n} for w, n in p.items()],
        "plate_count": 2 * p.plate_count,
    })
    return rep

def load_plates_csv(path):
    import pandas as pd

    df = pd.read_csv(path)
    wcol = next((c for c in ("weight", "weight_kg", "weight_lb") if c in df.columns), None)
    ccol = next((c for c in ("count", "total_count") if c in df.columns), None)
    if wcol is None or ccol is None:
        raise ValueError(f"{path}: need a weight column and a count column, got {list(df.columns)}")

    plates = []
    for i, r in df.iterrows():
        if pd.isna(r[wcol]) or pd.isna(r[ccol]):
            raise ValueError(f"{path}: row {i + 1} has an empty weight or count")
        pid = int(r["id"]) if "id" in df.columns and not pd.isna(r["id"]) else i + 1
        plates.append(PlateType(id=pid, weight=float(r[wcol]), count=r[ccol]))
    return plates

def save_plan_csv(plan, path):
    keys = ["weight", "per_side", "total"]
    with open(path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=keys); w.writeheader()
        for weight, n in plan.items(): w.writerow({"weight": weight, "per_side": n, "total": 2 * n})

def save_report_json(rep, path):
    with open(path, "w") as f: json.dump(rep, f, indent=2)

def draw_bar(plan, out_png, unit="kg", title=None):
    """Side view of the loaded bar; plate height grows with the square root of its weight."""
    plates = [w for w, n in plan.items() for _ in range(n)]   # inner to outer
    heaviest = max(plates, default=1.0)
    shades = {w: PLATE_COLORS[i % len(PLATE_COLORS)] for i, (w, _) in enumerate(plan.items())}
    thick, sleeve, half_shaft = 0.6, 0.8 + 0.6 * len(plates), 6.0

    fig, ax = plt.subplots(figsize=(8, 3))
    span = half_shaft + sleeve
    ax.add_patch(Rectangle((-half_shaft, -0.15), 2 * half_shaft, 0.3, color="0.55"))
    for side in (-1, 1):
        ax.add_patch(Rectangle((side * half_shaft if side > 0 else -span, -0.25), sleeve, 0.5, color="0.7"))
        x = half_shaft + 0.2
        for w in plates:
            h = 4.0 * (w / heaviest) ** 0.5
            left = x if side > 0 else -x - thick
            ax.add_patch(Rectangle((left, -h / 2), thick, h, facecolor=shades[w], edgecolor="k", linewidth=0.5))
            x += thick
    for w, n in plan.items():
        ax.plot([], [], "s", color=shades[w], label=f"{n}x{_num(w)}{unit}")
    ax.set_xlim(-span - 0.5, span + 0.5); ax.set_ylim(-2.5, 2.5)
    ax.set_aspect("equal"); ax.axis("off")
    if plan.per_side: ax.legend(loc="upper center", ncol=min(5, len(plan.per_side)), fontsize=7, frameon=False)
    ax.set_title(title or f"{_num(plan.target_weight)}{unit} ({_num(plan.weight_per_side)}{unit} per side)")
    fig.tight_layout(); fig.savefig(out_png, dpi=150); plt.close(fig)
