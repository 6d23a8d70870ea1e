"""Entry point for running cpusim simulations.

Usage:
    cpusim --scheduler rr --processes 20 --seed 7
    cpusim --scheduler stcf --workload workload.json
"""

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from pydantic import BaseModel, Field, ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cpusim.models.durations import DurationTable
from cpusim.models.process import ProcessSpec
from cpusim.schedulers import RR_QUANTUM, UnknownSchedulerError, available_schedulers, get_scheduler
from cpusim.simulator.engine import SchedulingError, SimulationEngine
from cpusim.simulator.generator import WorkloadGenerator, dump_workload, load_workload

logger = logging.getLogger(__name__)
console = Console()
err_console = Console(stderr=True)


class SimulationConfig(BaseModel):
    """Validated run configuration built from command-line arguments."""

    scheduler: str = Field(default="fifo", description="Policy name: fifo, sjf, stcf, rr")
    quantum: int = Field(default=RR_QUANTUM, gt=0, description="Round-robin time slice in ticks")
    time_limit: int = Field(default=100_000, gt=0, description="Stop after this many ticks")
    seed: int = Field(default=42, description="Seed for generated workloads")
    num_processes: int = Field(default=10, gt=0, description="Processes to generate")
    workload: Optional[Path] = Field(default=None, description="JSON workload file to load")
    save_workload: Optional[Path] = Field(default=None, description="Write the workload used here")
    verbose: bool = False


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="cpusim — discrete-time CPU scheduling simulator"
    )
    parser.add_argument("--scheduler", type=str, default="fifo",
                        help=f"Scheduler: {', '.join(available_schedulers())} (default: fifo)")
    parser.add_argument("--workload", type=Path, default=None, help="JSON workload file (default: generated)")
    parser.add_argument("--processes", type=int, default=10, help="Processes to generate (default: 10)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--quantum", type=int, default=RR_QUANTUM,
                        help=f"Round-robin quantum in ticks (default: {RR_QUANTUM})")
    parser.add_argument("--time-limit", type=int, default=100_000, help="Tick budget (default: 100000)")
    parser.add_argument("--save-workload", type=Path, default=None, help="Save the workload as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every simulation event")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    return SimulationConfig(
        scheduler=args.scheduler,
        quantum=args.quantum,
        time_limit=args.time_limit,
        seed=args.seed,
        num_processes=args.processes,
        workload=args.workload,
        save_workload=args.save_workload,
        verbose=args.verbose,
    )


def load_processes(config: SimulationConfig) -> list[ProcessSpec]:
    """Read the configured workload file, or generate one from the seed."""
    if config.workload is not None:
        return load_workload(config.workload)
    return WorkloadGenerator(seed=config.seed).generate(num_processes=config.num_processes)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_arguments(argv)
    try:
        config = build_config(args)
    except ValidationError as exc:
        err_console.print(f"[bold red]Invalid configuration:[/bold red]\n{escape(str(exc))}")
        return 2

    configure_logging(config.verbose)

    try:
        processes = load_processes(config)
    except (OSError, ValidationError) as exc:
        err_console.print(f"[bold red]Cannot load workload:[/bold red] {escape(str(exc))}")
        return 1

    # The policy is resolved once, before anything runs
    try:
        scheduler = get_scheduler(
            config.scheduler,
            durations=DurationTable.from_specs(processes),
            quantum=config.quantum,
        )
    except UnknownSchedulerError as exc:
        err_console.print(f"[bold red]{escape(str(exc))}[/bold red]")
        return 1

    if config.save_workload is not None:
        try:
            dump_workload(processes, config.save_workload)
        except OSError as exc:
            err_console.print(f"[bold red]Cannot save workload:[/bold red] {escape(str(exc))}")
            return 1
        logger.info("Workload written to %s", config.save_workload)

    engine = SimulationEngine(
        processes=processes,
        scheduler=scheduler,
        time_limit=config.time_limit,
    )
    try:
        metrics = engine.run()
    except SchedulingError as exc:
        err_console.print(f"[bold red]Simulation aborted:[/bold red] {escape(str(exc))}")
        return 1

    metrics.print_report(console=console)
    console.print(
        f"\n[dim]Recorded {len(engine.event_log)} events "
        f"in {metrics.report.total_simulation_time} ticks[/dim]"
    )
    return 0
