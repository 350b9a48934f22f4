# FILE: bytering/metrics/counters.py
# ------------------------------------------------------------------------------
class BufferCounters:
    def __init__(self):
        self.writes_ok = 0
        self.writes_failed = 0
        self.reads_ok = 0
        self.reads_empty = 0
        self.overruns = 0
        self.bytes_written = 0
        self.bytes_read = 0
        self.bytes_discarded = 0

    def inc_write_ok(self, count: int):
        self.writes_ok += 1
        self.bytes_written += count

    def inc_write_fail(self): self.writes_failed += 1

    def inc_overrun(self, written: int, discarded: int):
        self.overruns += 1
        self.writes_failed += 1
        self.bytes_written += written
        self.bytes_discarded += discarded

    def inc_read_ok(self, count: int):
        self.reads_ok += 1
        self.bytes_read += count

    def inc_read_empty(self): self.reads_empty += 1

    def snapshot(self):
        return {
            "writes_ok": self.writes_ok,
            "writes_failed": self.writes_failed,
            "reads_ok": self.reads_ok,
            "reads_empty": self.reads_empty,
            "overruns": self.overruns,
            "bytes_written": self.bytes_written,
            "bytes_read": self.bytes_read,
            "bytes_discarded": self.bytes_discarded,
        }
