"""
routes/performance.py -- Service diagnostics

  GET /performance -- uptime, memory usage (MB, no unit suffix), thread count

Reads START_TIME and PROCESS from app.main (set once at module load).
Time format:   "HH:mm:ss.SSS"
Memory format: "XX.XX"
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from fastapi import APIRouter

from app.models import PerformanceResponse

router = APIRouter()


def _format_uptime(uptime: timedelta) -> str:
    """Format a timedelta as 'HH:mm:ss.SSS' (hours may exceed 24)."""
    total_seconds = int(uptime.total_seconds())
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    ms = uptime.microseconds // 1000
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{ms:03d}"


@router.get("/performance", response_model=PerformanceResponse)
def performance() -> PerformanceResponse:
    # Lazy import to avoid circular dependency at module load time
    import app.main as _main

    uptime = datetime.now(timezone.utc) - _main.START_TIME
    mem_mb = _main.PROCESS.memory_info().rss / (1024 * 1024)

    return PerformanceResponse(
        time=_format_uptime(uptime),
        memory=f"{mem_mb:.2f}",
        threads=_main.PROCESS.num_threads(),
    )
