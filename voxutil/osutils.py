"""Process memory usage read from the proc filesystem."""

from __future__ import annotations

import mmap
from dataclasses import dataclass

_VSIZE_FIELD = 22
_RSS_FIELD = 23


@dataclass(frozen=True)
class MemUsage:
    """Virtual memory size and resident set size, both in bytes."""

    vm_usage: float
    resident_set: float


def parse_proc_stat(text: str, page_size: int) -> MemUsage:
    """Extract memory usage from the contents of a ``/proc/<pid>/stat`` file."""
    fields = text.split()
    if len(fields) <= _RSS_FIELD:
        raise ValueError("stat text has too few fields")
    vsize = int(fields[_VSIZE_FIELD])
    rss = int(fields[_RSS_FIELD])
    return MemUsage(float(vsize), float(rss) * float(page_size))


def process_mem_usage(stat_path: str = "/proc/self/stat") -> MemUsage:
    """Return the memory usage of the current process."""
    with open(stat_path, encoding="ascii", errors="replace") as f:
        text = f.read()
    return parse_proc_stat(text, mmap.PAGESIZE)