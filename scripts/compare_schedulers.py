"""Compare schedulers side-by-side on the same workload.

Usage:
    python scripts/compare_schedulers.py --processes 30 --seed 42
"""

import argparse
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rich.console import Console
from rich.table import Table

from cpusim.metrics.collector import MetricsReport
from cpusim.models.durations import DurationTable
from cpusim.schedulers import RR_QUANTUM, available_schedulers, get_scheduler
from cpusim.simulator.engine import SimulationEngine
from cpusim.simulator.generator import WorkloadGenerator, load_workload

console = Console()


def run_with_scheduler(name, processes, quantum, time_limit):
    """Run simulation with the named scheduler and return the metrics report."""
    scheduler = get_scheduler(
        name,
        durations=DurationTable.from_specs(processes),
        quantum=quantum,
    )
    engine = SimulationEngine(processes=processes, scheduler=scheduler, time_limit=time_limit)
    return engine.run().report


def print_comparison(reports: dict[str, MetricsReport]):
    """Print side-by-side comparison of scheduler runs, best value in green."""
    names = list(reports.keys())

    metric_defs = [
        ("Finished", lambda r: r.processes_finished, False),
        ("Avg Turnaround", lambda r: r.avg_turnaround_time, True),
        ("Max Turnaround", lambda r: r.max_turnaround_time, True),
        ("Avg Response", lambda r: r.avg_response_time, True),
        ("Avg Waiting", lambda r: r.avg_waiting_time, True),
        ("Throughput", lambda r: r.throughput, False),
        ("CPU Utilization", lambda r: r.cpu_utilization, False),
        ("Context Switches", lambda r: r.context_switches, True),
        ("Simulation Time", lambda r: r.total_simulation_time, True),
    ]

    table = Table(title="Scheduler Comparison", border_style="cyan")
    table.add_column("Metric", style="bold")
    for name in names:
        table.add_column(name, justify="right")

    for label, getter, lower_better in metric_defs:
        values = [getter(reports[name]) for name in names]
        best = min(values) if lower_better else max(values)
        cells = []
        for value in values:
            text = f"{value:.3f}" if isinstance(value, float) else str(value)
            cells.append(f"[green]{text}[/green]" if value == best else text)
        table.add_row(label, *cells)

    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Compare cpusim schedulers on one workload")
    parser.add_argument("--processes", type=int, default=20, help="Number of processes (default: 20)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--workload", type=str, default=None, help="JSON workload file instead of generating")
    parser.add_argument("--quantum", type=int, default=RR_QUANTUM, help=f"RR quantum (default: {RR_QUANTUM})")
    parser.add_argument("--time-limit", type=int, default=100_000, help="Tick budget (default: 100000)")
    args = parser.parse_args()

    if args.workload:
        processes = load_workload(args.workload)
    else:
        processes = WorkloadGenerator(seed=args.seed).generate(num_processes=args.processes)

    console.print(f"[bold]Workload:[/bold] {len(processes)} processes, seed={args.seed}\n")

    reports = {
        name: run_with_scheduler(name, processes, args.quantum, args.time_limit)
        for name in available_schedulers()
    }
    print_comparison(reports)


if __name__ == "__main__":
    main()
