"""Process models — what the scheduler sees and what the engine tracks."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Sentinel pid: "no process on the CPU" as input, "leave the CPU idle" as output.
NO_PROCESS = -1


class ProcessInfo(BaseModel):
    """Read-only descriptor of one active process, as handed to a scheduler."""

    model_config = ConfigDict(frozen=True)

    pid: int = Field(ge=0, description="Unique, stable process identifier")
    executed_time: int = Field(default=0, ge=0, description="Ticks spent on CPU or I/O since creation")
    on_io: bool = Field(default=False, description="Currently blocked on I/O")


class IOBurst(BaseModel):
    """An I/O operation that starts once the process reaches `start` executed ticks."""

    start: int = Field(ge=0, description="Executed-time offset where the burst begins")
    length: int = Field(gt=0, description="Ticks spent blocked on I/O")

    @property
    def end(self) -> int:
        return self.start + self.length


class ProcessSpec(BaseModel):
    """Static description of a process in a workload."""

    pid: int = Field(ge=0, description="Unique process identifier")
    arrival_time: int = Field(default=0, ge=0, description="Tick at which the process becomes active")
    duration: int = Field(gt=0, description="Total ticks the process needs (CPU plus I/O)")
    io_bursts: list[IOBurst] = Field(default_factory=list, description="I/O operations, by start offset")

    @model_validator(mode="after")
    def _check_bursts(self) -> "ProcessSpec":
        """Bursts must fit inside the process lifetime and must not overlap."""
        self.io_bursts.sort(key=lambda b: b.start)
        previous_end = 0
        for burst in self.io_bursts:
            if burst.start < previous_end:
                raise ValueError(f"I/O burst at {burst.start} overlaps the previous burst")
            if burst.end > self.duration:
                raise ValueError(
                    f"I/O burst [{burst.start}, {burst.end}) exceeds duration {self.duration}"
                )
            previous_end = burst.end
        return self

    @property
    def cpu_time(self) -> int:
        """Ticks the process needs on the CPU."""
        return self.duration - sum(b.length for b in self.io_bursts)


class ProcessStatus(str, Enum):
    """Lifecycle: PENDING → READY ↔ RUNNING, READY/RUNNING → BLOCKED → READY, → FINISHED"""
    PENDING = "pending"
    READY = "ready"
    RUNNING = "running"
    BLOCKED = "blocked"
    FINISHED = "finished"


class ProcessState(BaseModel):
    """Mutable runtime record the engine keeps for every process."""

    spec: ProcessSpec
    status: ProcessStatus = Field(default=ProcessStatus.PENDING)
    executed_time: int = Field(default=0, ge=0)
    cpu_time: int = Field(default=0, ge=0, description="Ticks actually spent on the CPU")
    first_run_time: Optional[int] = Field(default=None, description="Tick of first dispatch")
    completion_time: Optional[int] = Field(default=None, description="Tick at which it finished")

    @property
    def pid(self) -> int:
        return self.spec.pid

    @property
    def arrival_time(self) -> int:
        return self.spec.arrival_time

    @property
    def on_io(self) -> bool:
        return self.status == ProcessStatus.BLOCKED

    @property
    def is_finished(self) -> bool:
        return self.status == ProcessStatus.FINISHED

    @property
    def turnaround_time(self) -> Optional[int]:
        """Time from arrival to completion."""
        if self.completion_time is not None:
            return self.completion_time - self.arrival_time
        return None

    @property
    def response_time(self) -> Optional[int]:
        """Time from arrival to first dispatch."""
        if self.first_run_time is not None:
            return self.first_run_time - self.arrival_time
        return None

    @property
    def waiting_time(self) -> Optional[int]:
        """Time spent active but neither running nor doing I/O."""
        if self.turnaround_time is not None:
            return self.turnaround_time - self.spec.duration
        return None

    def current_burst(self) -> Optional[IOBurst]:
        """The I/O burst covering the current executed time, if any."""
        for burst in self.spec.io_bursts:
            if burst.start <= self.executed_time < burst.end:
                return burst
        return None

    def snapshot(self) -> ProcessInfo:
        return ProcessInfo(pid=self.pid, executed_time=self.executed_time, on_io=self.on_io)

    def __repr__(self) -> str:
        return (
            f"ProcessState(pid={self.pid}, executed={self.executed_time}/{self.spec.duration}, "
            f"status={self.status.value})"
        )
