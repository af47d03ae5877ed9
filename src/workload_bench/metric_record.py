#!/usr/bin/env python3
"""
Metric record storage.

Contains the five measurements reported for one phase of one workload run.
"""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class MetricRecord:
    """
    Timing and resource usage for a single phase occurrence.

    Times are in milliseconds, CPU usage in percent, and max RSS in the
    platform's native unit (kilobytes on Linux).
    """

    user_time: float
    system_time: float
    cpu_usage: float
    wall_clock: float
    max_rss: int

    @classmethod
    def field_names(cls) -> list[str]:
        """Get the record's field names in declaration order."""
        return [f.name for f in fields(cls)]
