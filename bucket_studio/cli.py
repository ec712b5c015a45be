import argparse
import json
import logging
import sys
import time

from .arrays import parse_values, random_values
from .bucket_sort import generate_steps
from .playback import StepCursor
from .render import render_snapshot
from .settings import MAX_ARRAY_SIZE, load_settings

log = logging.getLogger(__name__)


def build_parser():
    p = argparse.ArgumentParser(
        prog="bucket-studio",
        description="Step through a bucket sort, one snapshot at a time.",
    )
    p.add_argument("values", nargs="*", help="array to sort (default: a random array)")
    p.add_argument("--size", type=int, help=f"length of the random array (0-{MAX_ARRAY_SIZE})")
    p.add_argument("--seed", type=int, help="seed for the random array")
    p.add_argument("--settings", help="settings JSON file to read")
    out = p.add_mutually_exclusive_group()
    out.add_argument("--json", action="store_true", help="dump all snapshots as JSON")
    out.add_argument("--step", type=int, metavar="I", help="show only snapshot I (clamped)")
    out.add_argument("--play", action="store_true", help="print snapshots one by one in real time")
    p.add_argument("--speed", type=int, help="play speed, 1 (slow) to 1000 (fast)")
    p.add_argument("--bars", action="store_true", help="draw the array as a column chart")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def _input_values(args, settings):
    if args.values:
        return parse_values(" ".join(args.values))
    size = settings.array_size if args.size is None else args.size
    if not 0 <= size <= MAX_ARRAY_SIZE:
        raise ValueError(f"--size must be between 0 and {MAX_ARRAY_SIZE}, got {size}")
    seed = settings.seed if args.seed is None else args.seed
    return random_values(size, seed)


def run(args, out=None):
    out      = out or sys.stdout
    settings = load_settings(args.settings)
    values   = _input_values(args, settings)
    log.info("sorting %s", values)
    steps    = generate_steps(values)
    cursor   = StepCursor(steps, settings.speed if args.speed is None else args.speed)

    def show(snap):
        print(f"[{cursor.index}/{cursor.last}] " + render_snapshot(snap, bars=args.bars), file=out)

    if args.json:
        json.dump([s.to_dict() for s in steps], out, indent=2)
        print(file=out)
    elif args.step is not None:
        cursor.seek(args.step)
        show(cursor.current)
    elif args.play:
        cursor.play()
        show(cursor.current)
        while cursor.playing:
            time.sleep(cursor.interval)
            if cursor.tick():
                print(file=out)
                show(cursor.current)
    else:
        for i in range(len(steps)):
            if i: print(file=out)
            show(cursor.seek(i))
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run(args)
    except ValueError as e:
        log.debug("aborting", exc_info=True)
        print(f"bucket-studio: error: {e}", file=sys.stderr)
        return 1
