"""Event types recorded by the discrete-time simulation."""

from enum import Enum
from dataclasses import dataclass, field
from typing import Optional


class EventType(str, Enum):
    """Things that happen to processes and the CPU during a run."""
    PROCESS_ARRIVAL = "process_arrival"
    CONTEXT_SWITCH = "context_switch"
    IO_START = "io_start"
    IO_COMPLETION = "io_completion"
    PROCESS_EXIT = "process_exit"
    CPU_IDLE = "cpu_idle"


@dataclass
class Event:
    """A single entry of the engine's event log; `sequence` is the append order."""
    time: int
    sequence: int
    event_type: EventType
    pid: Optional[int] = None
    metadata: dict = field(default_factory=dict)

    def __repr__(self) -> str:
        parts = [f"Event(t={self.time}, type={self.event_type.value}"]
        if self.pid is not None:
            parts.append(f", pid={self.pid}")
        if self.metadata:
            parts.append(f", {self.metadata}")
        parts.append(")")
        return "".join(parts)
