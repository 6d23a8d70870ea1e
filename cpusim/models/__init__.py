from cpusim.models.process import (
    NO_PROCESS,
    IOBurst,
    ProcessInfo,
    ProcessSpec,
    ProcessState,
    ProcessStatus,
)
from cpusim.models.durations import DurationOracle, DurationTable

__all__ = [
    "NO_PROCESS",
    "IOBurst",
    "ProcessInfo",
    "ProcessSpec",
    "ProcessState",
    "ProcessStatus",
    "DurationOracle",
    "DurationTable",
]
