"""
Tests for the SJF, STCF and Round-Robin schedulers, plus laws shared by all.

These tests verify:
    1. SJF never preempts a started process and otherwise picks the shortest job
    2. STCF picks the least remaining time and re-evaluates on every call
    3. RR keeps the current process inside its slice and rotates on boundaries
    4. Every policy returns the only process of a single-process snapshot
    5. Every policy is pure: identical inputs give identical outputs
"""

import pytest

from cpusim.models.durations import DurationTable
from cpusim.models.process import NO_PROCESS, ProcessInfo
from cpusim.schedulers import (
    FIFOScheduler,
    RoundRobinScheduler,
    SJFScheduler,
    STCFScheduler,
)


def _info(pid: int, executed: int = 0, on_io: bool = False) -> ProcessInfo:
    return ProcessInfo(pid=pid, executed_time=executed, on_io=on_io)


# ══════════════════════════════════════════════════════════════════════
# SJF
# ══════════════════════════════════════════════════════════════════════

class TestSJFScheduler:
    """Tests for non-preemptive shortest-job-first."""

    def setup_method(self):
        self.durations = DurationTable({1: 50, 2: 20, 3: 20, 4: 90})
        self.scheduler = SJFScheduler(self.durations)

    def test_picks_shortest_total_duration(self):
        procs = [_info(1), _info(4), _info(2)]
        assert self.scheduler.decide(procs, 3, 0, NO_PROCESS) == 2

    def test_first_minimum_wins_ties(self):
        procs = [_info(1), _info(3), _info(2), _info(4)]
        assert self.scheduler.decide(procs, 4, 0, NO_PROCESS) == 3

    def test_started_process_is_not_preempted(self):
        """A longer job that already started keeps the CPU."""
        procs = [_info(4, executed=1), _info(2), _info(3)]
        assert self.scheduler.decide(procs, 3, 10, 4) == 4

    def test_started_process_later_in_list_keeps_cpu(self):
        procs = [_info(2), _info(1, executed=30)]
        assert self.scheduler.decide(procs, 2, 31, 1) == 1

    def test_current_not_started_is_not_protected(self):
        procs = [_info(1), _info(2)]
        assert self.scheduler.decide(procs, 2, 0, 1) == 2

    def test_other_started_process_is_not_protected(self):
        """Only curr_pid is shielded; a started process off the CPU is not."""
        procs = [_info(1, executed=10), _info(2)]
        assert self.scheduler.decide(procs, 2, 15, NO_PROCESS) == 2

    def test_current_missing_from_snapshot(self):
        procs = [_info(1), _info(4)]
        assert self.scheduler.decide(procs, 2, 60, 2) == 1


# ══════════════════════════════════════════════════════════════════════
# STCF
# ══════════════════════════════════════════════════════════════════════

class TestSTCFScheduler:
    """Tests for preemptive shortest-time-to-completion-first."""

    def setup_method(self):
        self.durations = DurationTable({1: 100, 2: 30, 3: 60})
        self.scheduler = STCFScheduler(self.durations)

    def test_picks_least_remaining(self):
        procs = [_info(1, executed=90), _info(2), _info(3)]
        assert self.scheduler.decide(procs, 3, 90, 1) == 1

    def test_switches_when_minimum_changes(self):
        """Same processes, different progress: the decision follows remaining time."""
        first = [_info(1, executed=90), _info(2, executed=0)]
        second = [_info(1, executed=60), _info(2, executed=0)]
        assert self.scheduler.decide(first, 2, 90, 1) == 1
        assert self.scheduler.decide(second, 2, 91, 1) == 2

    def test_preempts_running_process(self):
        procs = [_info(3, executed=10), _info(2)]
        assert self.scheduler.decide(procs, 2, 10, 3) == 2

    def test_lowest_index_wins_ties(self):
        procs = [_info(3, executed=30), _info(2)]
        assert self.scheduler.decide(procs, 2, 30, 2) == 3

    def test_remaining_time(self):
        assert self.scheduler.remaining_time(_info(1, executed=25)) == 75


# ══════════════════════════════════════════════════════════════════════
# ROUND-ROBIN
# ══════════════════════════════════════════════════════════════════════

class TestRoundRobinScheduler:
    """Tests for round-robin with a 40-tick quantum."""

    def setup_method(self):
        self.scheduler = RoundRobinScheduler()
        self.procs = [_info(10), _info(20), _info(30)]

    def test_default_quantum(self):
        assert self.scheduler.quantum == 40

    @pytest.mark.parametrize("curr_time", [1, 2, 20, 39, 41, 79])
    def test_no_preemption_inside_slice(self, curr_time):
        assert self.scheduler.decide(self.procs, 3, curr_time, 10) == 10

    @pytest.mark.parametrize("curr_time", [40, 80, 120])
    def test_preempts_on_boundary(self, curr_time):
        assert self.scheduler.decide(self.procs, 3, curr_time, 10) == 20

    def test_middle_process_moves_to_next(self):
        assert self.scheduler.decide(self.procs, 3, 40, 20) == 30

    def test_last_process_falls_back_to_first(self):
        procs = [_info(20), _info(30), _info(10)]
        assert self.scheduler.decide(procs, 3, 40, 10) == 20

    def test_missing_current_runs_first(self):
        assert self.scheduler.decide(self.procs, 3, 13, 99) == 10
        assert self.scheduler.decide(self.procs, 3, 13, NO_PROCESS) == 10

    @pytest.mark.parametrize("curr_time", [0, 7, 40])
    def test_single_process_always_runs(self, curr_time):
        procs = [_info(5)]
        assert self.scheduler.decide(procs, 1, curr_time, 5) == 5
        assert self.scheduler.decide(procs, 1, curr_time, NO_PROCESS) == 5

    def test_custom_quantum(self):
        scheduler = RoundRobinScheduler(quantum=4)
        assert scheduler.decide(self.procs, 3, 3, 10) == 10
        assert scheduler.decide(self.procs, 3, 4, 10) == 20

    @pytest.mark.parametrize("quantum", [0, -40])
    def test_invalid_quantum(self, quantum):
        with pytest.raises(ValueError, match="quantum"):
            RoundRobinScheduler(quantum=quantum)


# ══════════════════════════════════════════════════════════════════════
# LAWS SHARED BY EVERY POLICY
# ══════════════════════════════════════════════════════════════════════

DURATIONS = DurationTable({1: 80, 2: 15, 3: 45, 7: 60})


def _all_schedulers():
    return [
        FIFOScheduler(),
        SJFScheduler(DURATIONS),
        STCFScheduler(DURATIONS),
        RoundRobinScheduler(),
    ]


class TestSchedulerLaws:
    """Properties every policy must satisfy."""

    @pytest.mark.parametrize("scheduler", _all_schedulers(), ids=lambda s: s.name)
    @pytest.mark.parametrize("curr_time", [0, 1, 40, 95])
    @pytest.mark.parametrize("curr_pid", [NO_PROCESS, 7, 3])
    def test_single_process_is_selected(self, scheduler, curr_time, curr_pid):
        procs = [_info(7, executed=min(curr_time, 59))]
        assert scheduler.decide(procs, 1, curr_time, curr_pid) == 7

    @pytest.mark.parametrize("scheduler", _all_schedulers(), ids=lambda s: s.name)
    def test_identical_inputs_identical_output(self, scheduler):
        procs = [_info(1, executed=10), _info(2, executed=3), _info(3)]
        decisions = [scheduler.decide(procs, 3, 40, 1) for _ in range(5)]
        assert len(set(decisions)) == 1

    @pytest.mark.parametrize("scheduler", _all_schedulers(), ids=lambda s: s.name)
    def test_decide_leaves_scheduler_unchanged(self, scheduler):
        before = dict(vars(scheduler))
        scheduler.decide([_info(1), _info(2)], 2, 80, 1)
        assert vars(scheduler) == before

    @pytest.mark.parametrize("scheduler", _all_schedulers(), ids=lambda s: s.name)
    def test_result_is_in_snapshot(self, scheduler):
        procs = [_info(3, executed=5), _info(1), _info(2, executed=14)]
        assert scheduler.decide(procs, 3, 40, 3) in {1, 2, 3}
