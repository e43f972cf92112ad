from collections import Counter
from dataclasses import dataclass, field


@dataclass
class RunStatistics:
    max_deletes: int
    dry_run: bool = True
    processed: int = 0
    tickets_seen: int = 0
    skipped: int = 0
    cap_reached: bool = False
    routes: Counter = field(default_factory=Counter)

    def record_processed(self):
        self.processed += 1
        if self.processed >= self.max_deletes:
            self.cap_reached = True
        return self.cap_reached

    def as_dict(self):
        return {
            "processed": self.processed,
            "tickets_seen": self.tickets_seen,
            "skipped": self.skipped,
            "cap_reached": self.cap_reached,
            "max_deletes": self.max_deletes,
            "dry_run": self.dry_run,
            "routes": dict(self.routes),
        }
