# date-tasks — Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from src.core.ports.time import DateLike, DateRangeError, TimePort

__all__ = [
    "DateLike",
    "DateRangeError",
    "TimePort",
]
