"""Base Scheduler — abstract interface for all CPU scheduling policies."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from cpusim.models.process import ProcessInfo


class BaseScheduler(ABC):
    """Abstract base class for all schedulers. Subclasses implement decide().

    A scheduler is a pure decision function: it never writes to itself inside
    decide(), so identical inputs always give the identical pid.
    """

    @abstractmethod
    def decide(
        self,
        procs: Sequence[ProcessInfo],
        procs_count: int,
        curr_time: int,
        curr_pid: int,
    ) -> int:
        """Return the pid to run for the next tick, or NO_PROCESS to idle.

        `procs` holds the active processes in arrival order and is never empty.
        Returning `curr_pid` keeps the current process on the CPU.
        """
        ...

    def __call__(
        self,
        procs: Sequence[ProcessInfo],
        procs_count: int,
        curr_time: int,
        curr_pid: int,
    ) -> int:
        return self.decide(procs, procs_count, curr_time, curr_pid)

    @property
    def name(self) -> str:
        """Human-readable scheduler name for reports."""
        return self.__class__.__name__
