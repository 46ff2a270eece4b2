from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

log = logging.getLogger("seeme.diagnostics")

SEPARATOR = "-" * 68


class CallDiagnostics:
    """
    Per-call diagnostic buffer.

    One instance is created for each gateway call and flushed once to the
    optional log file. Writing the file is best effort: an unwritable sink is
    reported on the logger and never raised to the caller.
    """

    def __init__(self, title: str, log_file_destination: Optional[str] = None):
        self.log_file_destination = log_file_destination
        self.lines: List[str] = [SEPARATOR, title]

    def add(self, message: str) -> None:
        # Never forwarded to the logger: lines hold unmasked numbers and message text.
        self.lines.append(message)

    def text(self) -> str:
        return "\n".join(self.lines)

    def flush(self) -> bool:
        if not self.log_file_destination:
            return False
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        try:
            with open(self.log_file_destination, "a", encoding="utf-8") as f:
                for line in self.lines:
                    f.write(f"{ts} - {line}\n")
        except OSError as e:
            log.warning(
                "seeme_log_sink_failed",
                extra={
                    "extra": {
                        "event": "seeme_log_sink_failed",
                        "path": self.log_file_destination,
                        "error_type": type(e).__name__,
                        "message": str(e),
                    }
                },
            )
            return False
        return True
