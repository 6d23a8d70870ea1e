from cpusim.simulator.events import Event, EventType
from cpusim.simulator.engine import SchedulingError, SimulationEngine
from cpusim.simulator.generator import Workload, WorkloadGenerator, dump_workload, load_workload

__all__ = [
    "Event",
    "EventType",
    "SchedulingError",
    "SimulationEngine",
    "Workload",
    "WorkloadGenerator",
    "dump_workload",
    "load_workload",
]
