"""Scheduler registry — resolves a configured policy name to a scheduler."""

from collections.abc import Callable
from enum import Enum
from typing import Optional

from cpusim.models.durations import DurationOracle
from cpusim.schedulers.base import BaseScheduler
from cpusim.schedulers.fifo import FIFOScheduler
from cpusim.schedulers.round_robin import RR_QUANTUM, RoundRobinScheduler
from cpusim.schedulers.sjf import SJFScheduler
from cpusim.schedulers.stcf import STCFScheduler


class SchedulerName(str, Enum):
    """The closed set of policies the simulator understands."""
    FIFO = "fifo"
    SJF = "sjf"
    STCF = "stcf"
    RR = "rr"


class UnknownSchedulerError(ValueError):
    """Raised when a policy name is outside the recognized set."""

    def __init__(self, name: str):
        self.name = name
        self.available = available_schedulers()
        super().__init__(
            f"Invalid scheduler name: {name!r}. Available: {', '.join(self.available)}"
        )


def _needs_durations(
    factory: Callable[[DurationOracle], BaseScheduler],
) -> Callable[[Optional[DurationOracle], int], BaseScheduler]:
    def build(durations: Optional[DurationOracle], quantum: int) -> BaseScheduler:
        if durations is None:
            raise ValueError(f"{factory.__name__} requires a duration oracle")
        return factory(durations)
    return build


_FACTORIES: dict[SchedulerName, Callable[[Optional[DurationOracle], int], BaseScheduler]] = {
    SchedulerName.FIFO: lambda durations, quantum: FIFOScheduler(),
    SchedulerName.SJF: _needs_durations(SJFScheduler),
    SchedulerName.STCF: _needs_durations(STCFScheduler),
    SchedulerName.RR: lambda durations, quantum: RoundRobinScheduler(quantum=quantum),
}


def available_schedulers() -> list[str]:
    return [name.value for name in SchedulerName]


def get_scheduler(
    name: str,
    durations: Optional[DurationOracle] = None,
    quantum: int = RR_QUANTUM,
) -> BaseScheduler:
    """Factory function to get a scheduler by name.

    Matching is exact ("rr", not "RR"). SJF and STCF need `durations`.
    """
    try:
        key = SchedulerName(name)
    except ValueError:
        raise UnknownSchedulerError(name) from None
    return _FACTORIES[key](durations, quantum)
