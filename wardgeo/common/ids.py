"""Run identifier helpers."""

from __future__ import annotations

from datetime import datetime, timezone

RUN_ID_PREFIX = "wardgeo"


def generate_run_id(fd_zone: bool | None = None) -> str:
    """Sortable UTC run id, tagged with the output mode when it is known."""
    stamp = datetime.now(tz=timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
    if fd_zone is None:
        return f"{RUN_ID_PREFIX}-{stamp}"
    mode = "fd" if fd_zone else "nonfd"
    return f"{RUN_ID_PREFIX}-{mode}-{stamp}"
