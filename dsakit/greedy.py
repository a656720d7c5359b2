"""Greedy algorithms: activity selection, fractional knapsack, job sequencing."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def max_activities(intervals: Iterable[tuple[int, int]]) -> int:
    """Return how many non-overlapping ``(start, end)`` activities can be done.

    Activities are taken by earliest end; one may start when the last ends.
    """
    ordered = sorted(intervals, key=lambda interval: interval[1])
    if not ordered:
        return 0
    count = 1
    finish = ordered[0][1]
    for start, end in ordered[1:]:
        if start >= finish:
            finish = end
            count += 1
    return count


def fractional_knapsack(items: Iterable[tuple[float, float]], capacity: float) -> float:
    """Return the best profit from ``(profit, weight)`` items, splitting at most one."""
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    goods = list(items)
    if any(weight <= 0 for _, weight in goods):
        raise ValueError("weights must be positive")
    goods.sort(key=lambda item: item[0] / item[1], reverse=True)

    total = 0.0
    remaining = capacity
    for profit, weight in goods:
        if weight <= remaining:
            total += profit
            remaining -= weight
        elif remaining != 0:
            total += remaining / weight * profit
            remaining = 0
    return total


@dataclass(frozen=True)
class Job:
    """A job with a label, the last time slot it may run in, and its profit."""

    number: int
    deadline: int
    profit: int


def job_sequencing(jobs: Iterable[Job]) -> tuple[list[Job], int]:
    """Schedule unit-time jobs for the most profit.

    Returns the scheduled jobs in slot order and their total profit.
    """
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    n = len(ordered)
    slots: list[Job | None] = [None] * n
    for job in ordered:
        for slot in range(min(n, job.deadline) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = job
                break
    scheduled = [job for job in slots if job is not None]
    return scheduled, sum(job.profit for job in scheduled)