"""Workload generator — reproducible process sets, plus JSON workload files."""

import json
import random
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from cpusim.models.process import IOBurst, ProcessSpec


class Workload(BaseModel):
    """On-disk workload format: {"processes": [...]}."""

    processes: list[ProcessSpec] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_pids(self) -> "Workload":
        seen: set[int] = set()
        for spec in self.processes:
            if spec.pid in seen:
                raise ValueError(f"duplicate pid {spec.pid} in workload")
            seen.add(spec.pid)
        return self


class WorkloadGenerator:
    """Generates deterministic process sets using a seeded RNG."""

    def __init__(self, seed: int = 42):
        self.rng = random.Random(seed)
        self._pid_counter = 0

    def generate(
        self,
        num_processes: int = 10,
        max_arrival: int = 200,
        min_duration: int = 10,
        max_duration: int = 300,
        io_probability: float = 0.3,
        max_io_length: int = 30,
    ) -> list[ProcessSpec]:
        """Generate processes sorted by arrival. Some get a single I/O burst mid-run."""
        if min_duration <= 0 or max_duration < min_duration:
            raise ValueError("durations must satisfy 0 < min_duration <= max_duration")
        if not 0.0 <= io_probability <= 1.0:
            raise ValueError("io_probability must be within [0, 1]")

        processes: list[ProcessSpec] = []

        for _ in range(num_processes):
            pid = self._pid_counter
            self._pid_counter += 1

            arrival_time = self.rng.randint(0, max_arrival)
            cpu_time = self.rng.randint(min_duration, max_duration)

            io_bursts: list[IOBurst] = []
            duration = cpu_time
            # I/O never starts at offset 0 and always leaves CPU work after it
            if cpu_time > 2 and self.rng.random() < io_probability:
                start = self.rng.randint(1, cpu_time - 1)
                length = self.rng.randint(1, max_io_length)
                io_bursts.append(IOBurst(start=start, length=length))
                duration += length

            processes.append(ProcessSpec(
                pid=pid,
                arrival_time=arrival_time,
                duration=duration,
                io_bursts=io_bursts,
            ))

        processes.sort(key=lambda p: (p.arrival_time, p.pid))
        return processes


def load_workload(path: str | Path) -> list[ProcessSpec]:
    """Read and validate a JSON workload file."""
    raw = Path(path).read_text(encoding="utf-8")
    return Workload.model_validate_json(raw).processes


def dump_workload(processes: list[ProcessSpec], path: str | Path) -> None:
    """Write processes as a JSON workload file."""
    workload = Workload(processes=processes)
    Path(path).write_text(json.dumps(workload.model_dump(), indent=2) + "\n", encoding="utf-8")
