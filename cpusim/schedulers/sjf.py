"""SJF Scheduler — non-preemptive shortest-job-first."""

from collections.abc import Sequence

from cpusim.models.durations import DurationOracle
from cpusim.models.process import ProcessInfo
from cpusim.schedulers.base import BaseScheduler


class SJFScheduler(BaseScheduler):
    """Runs the process with the smallest total duration, to completion.

    Once the current process has started (executed_time > 0) it keeps the
    CPU until it blocks or exits. Ties go to the earliest process in the list.
    """

    def __init__(self, durations: DurationOracle):
        self.durations = durations

    def decide(
        self,
        procs: Sequence[ProcessInfo],
        procs_count: int,
        curr_time: int,
        curr_pid: int,
    ) -> int:
        best_index = 0
        best_time = self.durations.total_time(procs[0].pid)

        for i in range(procs_count):
            proc = procs[i]
            if proc.pid == curr_pid and proc.executed_time > 0:
                return curr_pid

            total = self.durations.total_time(proc.pid)
            if total < best_time:
                best_time = total
                best_index = i

        return procs[best_index].pid
