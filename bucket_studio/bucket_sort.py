import logging

from .steps import (
    DOMAIN_SIZE, LINE_APPEND, LINE_BUCKET_LOOP, LINE_CLAMP, LINE_INDEX, LINE_RETURN,
    LINE_SORT, LINE_START, LINE_WRITE_BACK, NUM_BUCKETS, Phase, Snapshot,
)

log = logging.getLogger(__name__)

# ============================================================
# ======================= PARTITIONING =======================
# ============================================================

def _range_width(bucket_count, domain_size):
    if bucket_count < 1:
        raise ValueError(f"bucket_count must be positive, got {bucket_count}")
    if domain_size < bucket_count:
        raise ValueError(f"domain_size {domain_size} is smaller than bucket_count {bucket_count}")
    return domain_size // bucket_count


def bucket_ranges(bucket_count=NUM_BUCKETS, domain_size=DOMAIN_SIZE):
    """
    Half-open (lo, hi) range of each bucket.
    The last bucket runs up to domain_size and also takes anything above it.
    """
    w = _range_width(bucket_count, domain_size)
    ranges = [(i * w, (i + 1) * w) for i in range(bucket_count)]
    ranges[-1] = (ranges[-1][0], domain_size)
    return ranges


def bucket_index(value: int, bucket_count=NUM_BUCKETS, domain_size=DOMAIN_SIZE) -> int:
    idx = value // _range_width(bucket_count, domain_size)
    if idx >= bucket_count: idx = bucket_count - 1
    if idx < 0: idx = 0
    return idx

# ============================================================
# ===================== STEP GENERATOR =======================
# ============================================================

def iter_steps(values, *, bucket_count=NUM_BUCKETS, domain_size=DOMAIN_SIZE):
    """
    Run bucket sort on a private copy of `values`, yielding a Snapshot
    before and after every move. The input is never touched.
    """
    w      = _range_width(bucket_count, domain_size)
    ranges = bucket_ranges(bucket_count, domain_size)
    arr    = list(values)
    bkts   = [[] for _ in range(bucket_count)]

    def frame(phase, text, line, index=None, bucket=None):
        return Snapshot(
            values=tuple(arr),
            buckets=tuple(tuple(b) for b in bkts),
            phase=phase,
            narration=text,
            active_index=index,
            active_bucket=bucket,
            highlight_line=line,
        )

    yield frame(Phase.INIT,
                f"Starting bucket sort. Values are dealt into {bucket_count} buckets by range, "
                "sorted inside each bucket, then joined back together.",
                LINE_START)

    for i in range(len(arr)):
        val = arr[i]
        b   = bucket_index(val, bucket_count, domain_size)
        lo, hi = ranges[b]
        if val // w >= bucket_count:
            line = LINE_CLAMP
            text = f"{val} is past the top of the 0-{domain_size} range, so it is clamped into the last bucket, {b}."
        elif val < 0:
            line = LINE_INDEX
            text = f"{val} is below 0, so it is clamped into the first bucket, {b}."
        else:
            line = LINE_INDEX
            text = f"{val} falls in the range {lo}-{hi}, so it goes into bucket {b}."
        yield frame(Phase.DISTRIBUTE, text, line, index=i)
        bkts[b].append(val)
        arr[i] = None
        yield frame(Phase.DISTRIBUTE, f"Dropped {val} into bucket {b}.",
                    LINE_APPEND, index=i)

    for b, bk in enumerate(bkts):
        if len(bk) < 2: continue
        yield frame(Phase.SORT_BUCKET, f"Sorting the contents of bucket {b}.",
                    LINE_BUCKET_LOOP, bucket=b)
        bk.sort()
        yield frame(Phase.SORT_BUCKET, f"Bucket {b} is now in order.",
                    LINE_SORT, bucket=b)

    # the frame is taken while the value still sits at the bucket front,
    # so every frame holds the full multiset
    k = 0
    for b, bk in enumerate(bkts):
        while bk:
            val = bk[0]
            yield frame(Phase.COLLECT,
                        f"Taking the sorted value {val} out of bucket {b} and writing it back to slot {k}.",
                        LINE_WRITE_BACK, bucket=b)
            bk.pop(0)
            arr[k] = val
            k += 1

    yield frame(Phase.COMPLETE, "Every bucket is empty and the whole array is sorted.",
                LINE_RETURN)


def generate_steps(values, *, bucket_count=NUM_BUCKETS, domain_size=DOMAIN_SIZE):
    """Materialise the full, immutable step sequence for `values`."""
    steps = tuple(iter_steps(values, bucket_count=bucket_count, domain_size=domain_size))
    log.debug("generated %d steps for %d values", len(steps), len(steps[0].values))
    return steps
