"""Poll timing with jitter."""

import random
from datetime import datetime, timedelta
from typing import Optional

from .config import SchedulerConfig


def next_delay(config: SchedulerConfig) -> float:
    """
    Seconds to wait before the next cycle.

    The delay is drawn uniformly between min_gap_minutes and
    max_gap_minutes so that polls do not hit the pod at fixed intervals.
    """
    minutes = random.uniform(config.min_gap_minutes, config.max_gap_minutes)
    return minutes * 60


def should_run_now(last_run: Optional[datetime], config: SchedulerConfig) -> bool:
    """
    Determine if a cycle is due, based on the last run time.

    - If last_run is None, return True (first run).
    - If gap < min_gap_minutes, return False (too soon).
    - Otherwise return True.

    Args:
        last_run: Naive UTC timestamp of the last cycle, or None.
        config: Scheduler configuration.
    """
    if last_run is None:
        return True
    gap = datetime.utcnow() - last_run
    return gap >= timedelta(minutes=config.min_gap_minutes)
