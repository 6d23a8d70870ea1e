"""Metrics Collector — measures scheduling performance."""

from dataclasses import dataclass, field
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cpusim.models.process import ProcessState, ProcessStatus


@dataclass
class ProcessRow:
    """Per-process outcome for the report table."""
    pid: int
    arrival_time: int
    duration: int
    first_run_time: Optional[int]
    completion_time: Optional[int]
    turnaround_time: Optional[int]
    response_time: Optional[int]
    waiting_time: Optional[int]


@dataclass
class MetricsReport:
    """Container for all computed metrics."""
    scheduler_name: str = ""
    total_processes: int = 0
    processes_finished: int = 0
    processes_unfinished: int = 0
    avg_turnaround_time: float = 0.0
    max_turnaround_time: int = 0
    avg_response_time: float = 0.0
    avg_waiting_time: float = 0.0
    throughput: float = 0.0
    cpu_utilization: float = 0.0
    context_switches: int = 0
    idle_ticks: int = 0
    total_simulation_time: int = 0
    processes: list[ProcessRow] = field(default_factory=list)


class MetricsCollector:
    """Computes and reports scheduling performance metrics."""

    def __init__(self):
        self.report: Optional[MetricsReport] = None

    def calculate(
        self,
        processes: list[ProcessState],
        total_time: int,
        cpu_busy_time: int,
        context_switches: int,
        scheduler_name: str,
    ) -> MetricsReport:
        """Compute all metrics from final process states."""
        report = MetricsReport(
            scheduler_name=scheduler_name,
            total_processes=len(processes),
            context_switches=context_switches,
            total_simulation_time=total_time,
            idle_ticks=total_time - cpu_busy_time,
        )

        finished = [p for p in processes if p.status == ProcessStatus.FINISHED]
        report.processes_finished = len(finished)
        report.processes_unfinished = len(processes) - len(finished)

        turnarounds = [p.turnaround_time for p in finished if p.turnaround_time is not None]
        if turnarounds:
            report.avg_turnaround_time = sum(turnarounds) / len(turnarounds)
            report.max_turnaround_time = max(turnarounds)

        waits = [p.waiting_time for p in finished if p.waiting_time is not None]
        if waits:
            report.avg_waiting_time = sum(waits) / len(waits)

        # Response time counts every process that got the CPU at least once
        responses = [p.response_time for p in processes if p.response_time is not None]
        if responses:
            report.avg_response_time = sum(responses) / len(responses)

        if total_time > 0:
            report.throughput = report.processes_finished / total_time
            report.cpu_utilization = cpu_busy_time / total_time

        report.processes = [
            ProcessRow(
                pid=p.pid,
                arrival_time=p.arrival_time,
                duration=p.spec.duration,
                first_run_time=p.first_run_time,
                completion_time=p.completion_time,
                turnaround_time=p.turnaround_time,
                response_time=p.response_time,
                waiting_time=p.waiting_time,
            )
            for p in sorted(processes, key=lambda p: (p.arrival_time, p.pid))
        ]

        self.report = report
        return report

    def print_report(self, console: Optional[Console] = None, show_processes: bool = True) -> None:
        """Print formatted metrics report."""
        console = console or Console()
        if self.report is None:
            console.print("[yellow]No metrics calculated yet. Run calculate() first.[/yellow]")
            return

        r = self.report
        console.print(Panel(
            f"[bold cyan]cpusim — Simulation Report[/bold cyan]\n"
            f"Scheduler: [bold yellow]{r.scheduler_name}[/bold yellow]",
            border_style="cyan",
        ))

        summary = Table(title="Summary", border_style="green")
        summary.add_column("Metric", style="bold")
        summary.add_column("Value", justify="right")
        summary.add_row("Processes", str(r.total_processes))
        summary.add_row("Finished", f"[green]{r.processes_finished}[/green]")
        summary.add_row(
            "Unfinished",
            f"[{'red' if r.processes_unfinished else 'green'}]{r.processes_unfinished}[/]",
        )
        summary.add_row("Avg Turnaround Time", f"{r.avg_turnaround_time:.2f}")
        summary.add_row("Max Turnaround Time", str(r.max_turnaround_time))
        summary.add_row("Avg Response Time", f"{r.avg_response_time:.2f}")
        summary.add_row("Avg Waiting Time", f"{r.avg_waiting_time:.2f}")
        summary.add_row("Throughput (procs/tick)", f"{r.throughput:.4f}")
        summary.add_row("CPU Utilization", f"{r.cpu_utilization:.1%}")
        summary.add_row("Context Switches", str(r.context_switches))
        summary.add_row("Idle Ticks", str(r.idle_ticks))
        summary.add_row("Simulation Time", str(r.total_simulation_time))
        console.print(summary)

        if show_processes and r.processes:
            table = Table(title="Processes", border_style="blue")
            for column in ("PID", "Arrival", "Duration", "First Run", "Completion",
                           "Turnaround", "Response", "Waiting"):
                table.add_column(column, justify="right")
            for row in r.processes:
                table.add_row(*(
                    "-" if value is None else str(value)
                    for value in (
                        row.pid, row.arrival_time, row.duration, row.first_run_time,
                        row.completion_time, row.turnaround_time, row.response_time,
                        row.waiting_time,
                    )
                ))
            console.print(table)
