"""Tests for resolving scheduler names to policies."""

import pytest

from cpusim.models.durations import DurationTable
from cpusim.models.process import NO_PROCESS, ProcessInfo
from cpusim.schedulers import (
    FIFOScheduler,
    RoundRobinScheduler,
    SchedulerName,
    SJFScheduler,
    STCFScheduler,
    UnknownSchedulerError,
    available_schedulers,
    get_scheduler,
)


class TestGetScheduler:
    """Tests for the name → scheduler lookup."""

    def setup_method(self):
        self.durations = DurationTable({1: 30, 2: 10, 3: 20})

    @pytest.mark.parametrize("name, expected", [
        ("fifo", FIFOScheduler),
        ("sjf", SJFScheduler),
        ("stcf", STCFScheduler),
        ("rr", RoundRobinScheduler),
    ])
    def test_known_names(self, name, expected):
        scheduler = get_scheduler(name, durations=self.durations)
        assert isinstance(scheduler, expected)

    def test_available_names(self):
        assert available_schedulers() == ["fifo", "sjf", "stcf", "rr"]
        assert [n.value for n in SchedulerName] == available_schedulers()

    def test_enum_member_accepted(self):
        assert isinstance(get_scheduler(SchedulerName.RR), RoundRobinScheduler)

    def test_unknown_name_raises(self):
        with pytest.raises(UnknownSchedulerError) as exc_info:
            get_scheduler("bogus")
        assert exc_info.value.name == "bogus"
        assert exc_info.value.available == ["fifo", "sjf", "stcf", "rr"]
        assert "bogus" in str(exc_info.value)

    def test_unknown_name_is_value_error(self):
        with pytest.raises(ValueError):
            get_scheduler("lottery")

    @pytest.mark.parametrize("name", ["RR", "Fifo", " sjf", ""])
    def test_matching_is_exact(self, name):
        with pytest.raises(UnknownSchedulerError):
            get_scheduler(name, durations=self.durations)

    @pytest.mark.parametrize("name", ["sjf", "stcf"])
    def test_duration_policies_need_oracle(self, name):
        with pytest.raises(ValueError, match="duration oracle"):
            get_scheduler(name)

    def test_fifo_and_rr_need_no_oracle(self):
        assert isinstance(get_scheduler("fifo"), FIFOScheduler)
        assert isinstance(get_scheduler("rr"), RoundRobinScheduler)

    def test_rr_follows_round_robin_law(self):
        rr = get_scheduler("rr")
        procs = [ProcessInfo(pid=p) for p in (1, 2, 3)]
        assert rr.quantum == 40
        assert rr(procs, 3, 39, 1) == 1
        assert rr(procs, 3, 40, 1) == 2
        assert rr(procs, 3, 40, 3) == 1

    def test_rr_quantum_passed_through(self):
        assert get_scheduler("rr", quantum=8).quantum == 8

    def test_oracle_is_injected(self):
        sjf = get_scheduler("sjf", durations=self.durations)
        procs = [ProcessInfo(pid=p) for p in (1, 2, 3)]
        assert sjf(procs, 3, 0, NO_PROCESS) == 2
