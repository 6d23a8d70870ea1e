"""Round-Robin Scheduler — fixed time slices aligned to the global clock."""

from collections.abc import Sequence

from cpusim.models.process import ProcessInfo
from cpusim.schedulers.base import BaseScheduler

RR_QUANTUM = 40


class RoundRobinScheduler(BaseScheduler):
    """Preempts the current process whenever curr_time hits a quantum boundary.

    On a boundary the next process in the list takes over. When the current
    process is the last one, or is no longer in the list, the first process runs.
    """

    def __init__(self, quantum: int = RR_QUANTUM):
        if quantum <= 0:
            raise ValueError(f"quantum must be positive, got {quantum}")
        self.quantum = quantum

    def decide(
        self,
        procs: Sequence[ProcessInfo],
        procs_count: int,
        curr_time: int,
        curr_pid: int,
    ) -> int:
        if procs_count == 1:
            return procs[0].pid

        for i in range(procs_count):
            if procs[i].pid != curr_pid:
                continue

            if curr_time % self.quantum != 0:
                return curr_pid

            if i < procs_count - 1:
                return procs[i + 1].pid
            break

        return procs[0].pid

    @property
    def name(self) -> str:
        return f"RoundRobinScheduler(q={self.quantum})"
