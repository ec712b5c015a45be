"""
Snapshot records produced by the step generator.

A Snapshot is a frozen picture of everything a viewer needs to draw one
frame: the array (with holes where values have left for a bucket), the
buckets, what is being touched right now, a sentence of narration and
the line of the illustrative listing to highlight.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# fixed partition scheme: five buckets over [0, 100)
NUM_BUCKETS = 5
DOMAIN_SIZE = 100


class Phase(str, Enum):
    INIT        = "init"
    DISTRIBUTE  = "distribute"
    SORT_BUCKET = "sort_bucket"
    COLLECT     = "collect"
    COMPLETE    = "complete"


@dataclass(frozen=True)
class Snapshot:
    values:         Tuple[Optional[int], ...]
    buckets:        Tuple[Tuple[int, ...], ...]
    phase:          Phase
    narration:      str           = ""
    active_index:   Optional[int] = None
    active_bucket:  Optional[int] = None
    highlight_line: Optional[int] = None

    @property
    def is_terminal(self) -> bool:
        return self.phase is Phase.COMPLETE

    def elements(self) -> list:
        """Every value present in this frame, array slots first then buckets."""
        out = [v for v in self.values if v is not None]
        for b in self.buckets:
            out.extend(b)
        return out

    def to_dict(self) -> dict:
        return {
            "values": list(self.values),
            "buckets": [list(b) for b in self.buckets],
            "activeIndex": self.active_index,
            "activeBucket": self.active_bucket,
            "phase": self.phase.value,
            "narration": self.narration,
            "highlightLine": self.highlight_line,
        }


# ============================================================
# ================== ILLUSTRATIVE LISTING ====================
# ============================================================

def code_listing(bucket_count=NUM_BUCKETS, domain_size=DOMAIN_SIZE):
    width = domain_size // bucket_count
    return (
        "def bucket_sort(arr):",                                  # 0
        f"    buckets = [[] for _ in range({bucket_count})]",     # 1
        "    for x in arr:",                                      # 2
        f"        idx = x // {width}",                            # 3
        f"        if idx >= {bucket_count}: idx = {bucket_count - 1}",  # 4
        "        buckets[idx].append(x)",                         # 5
        "    for bucket in buckets:",                             # 6
        "        bucket.sort()",                                  # 7
        "    k = 0",                                              # 8
        "    for bucket in buckets:",                             # 9
        "        for val in bucket:",                             # 10
        "            arr[k] = val",                               # 11
        "            k += 1",                                     # 12
        "    return arr",                                         # 13
    )


CODE_LISTING = code_listing()

LINE_START       = 0
LINE_INDEX       = 3
LINE_CLAMP       = 4
LINE_APPEND      = 5
LINE_BUCKET_LOOP = 6
LINE_SORT        = 7
LINE_WRITE_BACK  = 11
LINE_RETURN      = 13
