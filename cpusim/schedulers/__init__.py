from cpusim.schedulers.base import BaseScheduler
from cpusim.schedulers.fifo import FIFOScheduler
from cpusim.schedulers.sjf import SJFScheduler
from cpusim.schedulers.stcf import STCFScheduler
from cpusim.schedulers.round_robin import RR_QUANTUM, RoundRobinScheduler
from cpusim.schedulers.registry import (
    SchedulerName,
    UnknownSchedulerError,
    available_schedulers,
    get_scheduler,
)

__all__ = [
    "BaseScheduler",
    "FIFOScheduler",
    "SJFScheduler",
    "STCFScheduler",
    "RR_QUANTUM",
    "RoundRobinScheduler",
    "SchedulerName",
    "UnknownSchedulerError",
    "available_schedulers",
    "get_scheduler",
]
