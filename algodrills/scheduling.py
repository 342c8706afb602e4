"""Round-robin CPU scheduling with waiting and turnaround times."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_HEADER = "Processes  Burst time  Waiting time  Turn around time\n"


@dataclass(frozen=True)
class ProcessTimes:
    """Timing of one process under the schedule."""

    process: int
    burst: int
    waiting: int
    turnaround: int


@dataclass(frozen=True)
class ScheduleReport:
    """Per-process timings of a round-robin run."""

    processes: tuple[ProcessTimes, ...]
    quantum: int

    def average_waiting(self) -> float:
        """Mean waiting time over all processes."""
        return sum(p.waiting for p in self.processes) / len(self.processes)

    def average_turnaround(self) -> float:
        """Mean turnaround time over all processes."""
        return sum(p.turnaround for p in self.processes) / len(self.processes)

    def render(self) -> str:
        """Format the report as a table followed by the two averages."""
        rows = "".join(
            f" {p.process}\t\t{p.burst}\t {p.waiting}\t\t {p.turnaround}\n"
            for p in self.processes
        )
        return (
            _HEADER
            + rows
            + f"Average waiting time = {self.average_waiting():g}\n"
            + f"Average turn around time = {self.average_turnaround():g}"
        )


def round_robin(burst_times: Iterable[int], quantum: int) -> ScheduleReport:
    """Schedule processes arriving together with a fixed time ``quantum``."""
    bursts = list(burst_times)
    if not bursts:
        raise ValueError("no processes to schedule")
    if quantum <= 0:
        raise ValueError("quantum must be positive")
    if any(burst < 0 for burst in bursts):
        raise ValueError("burst times must not be negative")
    remaining = list(bursts)
    waiting = [0] * len(bursts)
    clock = 0
    while any(left > 0 for left in remaining):
        for index, left in enumerate(remaining):
            if left <= 0:
                continue
            if left > quantum:
                clock += quantum
                remaining[index] = left - quantum
            else:
                clock += left
                waiting[index] = clock - bursts[index]
                remaining[index] = 0
    processes = tuple(
        ProcessTimes(number, burst, wait, burst + wait)
        for number, (burst, wait) in enumerate(zip(bursts, waiting), start=1)
    )
    return ScheduleReport(processes, quantum)