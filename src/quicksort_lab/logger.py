from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping, Optional


class RunLogger:
    """Append-only JSONL logger for benchmark runs.

    `context` is stamped on every record (typically the master seed and the
    sizes of the run) so a single line is enough to reproduce the probe it
    describes.
    """

    def __init__(
        self,
        outdir: str | Path,
        filename: str = "run_log.jsonl",
        *,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.outdir = Path(outdir)
        self.outdir.mkdir(parents=True, exist_ok=True)
        self.path = self.outdir / filename
        self.context: Dict[str, Any] = dict(context or {})

    def log(self, event: str, payload: Dict[str, Any]) -> None:
        rec: Dict[str, Any] = {
            "ts_utc": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "event": event,
            "payload": payload,
        }
        if self.context:
            rec["context"] = self.context
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(rec, ensure_ascii=False) + "\n")
