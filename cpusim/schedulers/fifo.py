"""FIFO Scheduler — baseline first-in-first-out policy."""

from collections.abc import Sequence

from cpusim.models.process import ProcessInfo
from cpusim.schedulers.base import BaseScheduler


class FIFOScheduler(BaseScheduler):
    """Always runs the earliest-arrived active process."""

    def decide(
        self,
        procs: Sequence[ProcessInfo],
        procs_count: int,
        curr_time: int,
        curr_pid: int,
    ) -> int:
        # Active processes are kept in arrival order by the engine.
        return procs[0].pid
