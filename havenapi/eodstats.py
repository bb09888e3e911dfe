"""Accumulated game statistics rendered as chart data."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class EodStats:
    """Chart series built up incrementally from the ``eod_stats`` table."""

    refresh_time: int = 0
    labels: list[str] = field(default_factory=list)
    found: list[int] = field(default_factory=list)
    elemcnt: list[int] = field(default_factory=list)
    categorized: list[int] = field(default_factory=list)
    combcnt: list[int] = field(default_factory=list)
    usercnt: list[int] = field(default_factory=list)
    servercnt: list[int] = field(default_factory=list)
    chart: str = ""

    def refresh(self, conn: Any) -> bool:
        """Append rows newer than the last refresh; return whether any were added."""
        rows = conn.execute(
            "SELECT * FROM eod_stats WHERE time > ? ORDER BY time ASC",
            (self.refresh_time,),
        ).fetchall()
        changed = False
        for tm, elemcnt, combcnt, usercnt, found, categorized, servercnt in rows:
            self.labels.append(datetime.fromtimestamp(tm).strftime("%Y-%m-%d"))
            self.elemcnt.append(elemcnt)
            self.combcnt.append(combcnt)
            self.usercnt.append(usercnt)
            self.servercnt.append(servercnt)
            self.found.append(found)
            self.categorized.append(categorized)
            if not changed:
                changed = True
                self.refresh_time = int(time.time())
        if changed:
            self.chart = json.dumps(self.to_dict())
        return changed

    def to_dict(self) -> dict[str, list[Any]]:
        """Return the chart series as a JSON-ready mapping."""
        return {
            "labels": self.labels,
            "found": self.found,
            "elemcnt": self.elemcnt,
            "categorized": self.categorized,
            "combcnt": self.combcnt,
            "usercnt": self.usercnt,
            "servercnt": self.servercnt,
        }