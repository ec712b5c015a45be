"""Bucket sort, narrated as a sequence of immutable snapshots."""

from .arrays import parse_values, random_values
from .bucket_sort import bucket_index, bucket_ranges, generate_steps, iter_steps
from .playback import StepCursor
from .steps import CODE_LISTING, Phase, Snapshot

__version__ = "0.1.0"
