from .bucket_sort import bucket_ranges
from .steps import DOMAIN_SIZE, NUM_BUCKETS, code_listing

EMPTY_SLOT  = "."
CELL_WIDTH  = 4
BAR_HEIGHT  = 5

# ============================================================
# ======================= TEXT FRAMES ========================
# ============================================================

def _cell(val, active):
    txt = EMPTY_SLOT if val is None else str(val)
    if active: txt = f"[{txt}]"
    return txt.rjust(CELL_WIDTH)


def bar_level(value, domain_size=DOMAIN_SIZE, height=BAR_HEIGHT) -> int:
    """Rows a value fills in the column chart, rounded up, 0 for an empty slot."""
    if value is None or value <= 0:
        return 0
    return min(height, -(-value * height // domain_size))


def draw_bars(values, active_index=None, domain_size=DOMAIN_SIZE, height=BAR_HEIGHT):
    rows = []
    for level in range(height, 0, -1):
        row = ""
        for i, v in enumerate(values):
            ch = "#" if i == active_index else "|"
            row += (ch if bar_level(v, domain_size, height) >= level else " ").rjust(CELL_WIDTH)
        rows.append(row.rstrip())
    return rows


def render_snapshot(snap, bucket_count=NUM_BUCKETS, domain_size=DOMAIN_SIZE, bars=False):
    """Multi-line text frame for one snapshot."""
    lines = [f"== {snap.phase.value} =="]
    if bars and snap.values:
        lines.extend(draw_bars(snap.values, snap.active_index, domain_size))
    lines.append("array " + "".join(_cell(v, i == snap.active_index)
                                    for i, v in enumerate(snap.values)))
    ranges = bucket_ranges(bucket_count, domain_size)
    for b, ((lo, hi), bk) in enumerate(zip(ranges, snap.buckets)):
        mark  = ">" if b == snap.active_bucket else " "
        label = f"{lo}-{hi}"
        lines.append(f"{mark}b{b} {label:>7} : " + " ".join(str(v) for v in bk))
    lines.append(snap.narration)
    if snap.highlight_line is not None:
        src = code_listing(bucket_count, domain_size)[snap.highlight_line]
        lines.append(f"  {snap.highlight_line:>2} | {src.strip()}")
    return "\n".join(lines)
