"""Simulation Engine — discrete-time loop with one timer interrupt per tick."""

import logging
from typing import Optional

from cpusim.metrics.collector import MetricsCollector
from cpusim.models.process import NO_PROCESS, ProcessSpec, ProcessState, ProcessStatus
from cpusim.schedulers.base import BaseScheduler
from cpusim.simulator.events import Event, EventType

logger = logging.getLogger(__name__)


class SchedulingError(RuntimeError):
    """Raised when a scheduler returns a pid that is not active."""


class SimulationEngine:
    """Keeps the process table, asks the scheduler every tick, simulates I/O."""

    def __init__(
        self,
        processes: list[ProcessSpec],
        scheduler: BaseScheduler,
        time_limit: int = 100_000,
    ):
        pids = [spec.pid for spec in processes]
        if len(pids) != len(set(pids)):
            raise ValueError("process pids must be unique")
        if time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {time_limit}")

        self.processes: dict[int, ProcessState] = {
            spec.pid: ProcessState(spec=spec.model_copy(deep=True)) for spec in processes
        }
        self.scheduler = scheduler
        self.time_limit = time_limit

        self._pending: list[ProcessState] = sorted(
            self.processes.values(), key=lambda p: (p.arrival_time, p.pid)
        )
        # Kept in arrival order; this is the snapshot handed to the scheduler
        self._active: list[ProcessState] = []
        self._current_pid: int = NO_PROCESS
        self._current_time: int = 0
        self._event_counter: int = 0
        self._cpu_busy_time: int = 0
        self._context_switches: int = 0
        self._metrics = MetricsCollector()
        self.event_log: list[Event] = []
        self.timeline: list[int] = []

    @property
    def current_time(self) -> int:
        return self._current_time

    @property
    def current_pid(self) -> int:
        return self._current_pid

    def run(self) -> MetricsCollector:
        """Run until every process finished or the time limit is hit, then compute metrics."""
        logger.info(
            "Starting simulation: %d processes, scheduler=%s",
            len(self.processes), self.scheduler.name,
        )

        while (self._pending or self._active) and self._current_time < self.time_limit:
            self._admit_arrivals()

            running: Optional[ProcessState] = None
            if self._active:
                running = self._dispatch()

            self._advance(running)
            self._current_time += 1

        if self._pending or self._active:
            logger.warning(
                "Time limit %d reached with %d unfinished processes",
                self.time_limit, len(self._pending) + len(self._active),
            )

        self._metrics.calculate(
            processes=list(self.processes.values()),
            total_time=self._current_time,
            cpu_busy_time=self._cpu_busy_time,
            context_switches=self._context_switches,
            scheduler_name=self.scheduler.name,
        )
        return self._metrics

    # ── Tick phases ───────────────────────────────────────────────────

    def _admit_arrivals(self) -> None:
        """Move processes whose arrival time has come into the active list."""
        while self._pending and self._pending[0].arrival_time <= self._current_time:
            proc = self._pending.pop(0)
            if proc.current_burst() is not None:
                proc.status = ProcessStatus.BLOCKED
            else:
                proc.status = ProcessStatus.READY
            self._active.append(proc)
            self._record(EventType.PROCESS_ARRIVAL, proc.pid)

    def _dispatch(self) -> Optional[ProcessState]:
        """Timer interrupt: ask the scheduler which process gets this tick."""
        snapshot = [proc.snapshot() for proc in self._active]
        pid = self.scheduler.decide(snapshot, len(snapshot), self._current_time, self._current_pid)

        if pid == NO_PROCESS:
            self._preempt_current()
            self._record(EventType.CPU_IDLE)
            return None

        proc = self.processes.get(pid)
        if proc is None or proc.status in (ProcessStatus.PENDING, ProcessStatus.FINISHED):
            raise SchedulingError(
                f"{self.scheduler.name} chose pid {pid} at t={self._current_time}, "
                f"which is not an active process"
            )

        # A blocked process cannot take the CPU; the tick goes idle
        if proc.on_io:
            self._preempt_current()
            self._record(EventType.CPU_IDLE, pid, reason="selected process is on I/O")
            return None

        if pid != self._current_pid:
            previous = self._current_pid
            self._preempt_current()
            self._context_switches += 1
            self._current_pid = pid
            self._record(EventType.CONTEXT_SWITCH, pid, previous=previous)

        proc.status = ProcessStatus.RUNNING
        if proc.first_run_time is None:
            proc.first_run_time = self._current_time
        return proc

    def _advance(self, running: Optional[ProcessState]) -> None:
        """Let one tick elapse for the running process and every process on I/O."""
        self.timeline.append(running.pid if running is not None else NO_PROCESS)

        for proc in list(self._active):
            if proc is running:
                proc.executed_time += 1
                proc.cpu_time += 1
                self._cpu_busy_time += 1
            elif proc.on_io:
                proc.executed_time += 1
            else:
                continue
            self._update_after_tick(proc)

    def _update_after_tick(self, proc: ProcessState) -> None:
        """Apply exit, I/O start and I/O completion at the end of the tick."""
        now = self._current_time + 1

        if proc.executed_time >= proc.spec.duration:
            proc.status = ProcessStatus.FINISHED
            proc.completion_time = now
            self._active.remove(proc)
            if self._current_pid == proc.pid:
                self._current_pid = NO_PROCESS
            self._record(EventType.PROCESS_EXIT, proc.pid, time=now)
            return

        in_burst = proc.current_burst() is not None
        if proc.on_io and not in_burst:
            proc.status = ProcessStatus.READY
            self._record(EventType.IO_COMPLETION, proc.pid, time=now)
        elif not proc.on_io and in_burst:
            proc.status = ProcessStatus.BLOCKED
            if self._current_pid == proc.pid:
                self._current_pid = NO_PROCESS
            self._record(EventType.IO_START, proc.pid, time=now)

    # ── Utilities ─────────────────────────────────────────────────────

    def _preempt_current(self) -> None:
        """Take the current process off the CPU, if there is one."""
        if self._current_pid == NO_PROCESS:
            return
        previous = self.processes[self._current_pid]
        if previous.status == ProcessStatus.RUNNING:
            previous.status = ProcessStatus.READY
        self._current_pid = NO_PROCESS

    def _record(
        self,
        event_type: EventType,
        pid: Optional[int] = None,
        time: Optional[int] = None,
        **metadata,
    ) -> None:
        """Append an event to the log with a monotonically increasing sequence."""
        self._event_counter += 1
        event = Event(
            time=self._current_time if time is None else time,
            sequence=self._event_counter,
            event_type=event_type,
            pid=pid,
            metadata=metadata,
        )
        self.event_log.append(event)
        logger.debug("%r", event)
