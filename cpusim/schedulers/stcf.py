"""STCF Scheduler — preemptive shortest-time-to-completion-first."""

from collections.abc import Sequence

from cpusim.models.durations import DurationOracle
from cpusim.models.process import ProcessInfo
from cpusim.schedulers.base import BaseScheduler


class STCFScheduler(BaseScheduler):
    """Re-evaluates every tick and runs the process with least remaining time."""

    def __init__(self, durations: DurationOracle):
        self.durations = durations

    def remaining_time(self, proc: ProcessInfo) -> int:
        return self.durations.total_time(proc.pid) - proc.executed_time

    def decide(
        self,
        procs: Sequence[ProcessInfo],
        procs_count: int,
        curr_time: int,
        curr_pid: int,
    ) -> int:
        best_index = 0
        best_time = self.remaining_time(procs[0])

        for i in range(1, procs_count):
            remaining = self.remaining_time(procs[i])
            # Strict comparison: lowest index wins ties
            if remaining < best_time:
                best_time = remaining
                best_index = i

        return procs[best_index].pid
