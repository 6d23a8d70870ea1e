"""Duration oracle — total time a process needs, looked up by pid."""

from collections.abc import Iterable, Mapping
from typing import Protocol, runtime_checkable

from cpusim.models.process import ProcessSpec


@runtime_checkable
class DurationOracle(Protocol):
    """Read-only lookup used by SJF and STCF. Must be stable for a pid's lifetime."""

    def total_time(self, pid: int) -> int:
        ...


class DurationTable:
    """Mapping-backed oracle. Unknown pids raise KeyError."""

    def __init__(self, durations: Mapping[int, int]):
        self._durations: dict[int, int] = dict(durations)

    @classmethod
    def from_specs(cls, specs: Iterable[ProcessSpec]) -> "DurationTable":
        return cls({spec.pid: spec.duration for spec in specs})

    def total_time(self, pid: int) -> int:
        return self._durations[pid]

    def __contains__(self, pid: object) -> bool:
        return pid in self._durations

    def __len__(self) -> int:
        return len(self._durations)

    def __repr__(self) -> str:
        return f"DurationTable({len(self._durations)} processes)"
