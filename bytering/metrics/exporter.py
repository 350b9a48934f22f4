from prometheus_client import Counter, Gauge, start_http_server

from bytering.errors.kinds import ErrorKind

# Prometheus collectors (shared across buffers, one label set per buffer name)
bytes_written_total = Counter("ringbuf_bytes_written_total", "Bytes stored into ring buffers", ["buffer"])
bytes_read_total = Counter("ringbuf_bytes_read_total", "Bytes read out of ring buffers", ["buffer"])
bytes_discarded_total = Counter(
    "ringbuf_bytes_discarded_total", "Unread bytes dropped by overwrite-on-full writes", ["buffer"]
)
errors_total = Counter("ringbuf_errors_total", "Failed ring buffer operations", ["buffer", "kind"])
available_bytes = Gauge("ringbuf_available_bytes", "Unread bytes currently held", ["buffer"])


class RingMetricsExporter:
    """Mirrors one buffer's activity into the module-level collectors."""

    def __init__(self, buffer_name: str):
        self.buffer_name = buffer_name
        self._written = bytes_written_total.labels(buffer=buffer_name)
        self._read = bytes_read_total.labels(buffer=buffer_name)
        self._discarded = bytes_discarded_total.labels(buffer=buffer_name)
        self._available = available_bytes.labels(buffer=buffer_name)

    def record_write(self, written: int, discarded: int, available: int) -> None:
        if written:
            self._written.inc(written)
        if discarded:
            self._discarded.inc(discarded)
        self._available.set(available)

    def record_read(self, count: int, available: int) -> None:
        self._read.inc(count)
        self._available.set(available)

    def record_error(self, kind: ErrorKind) -> None:
        errors_total.labels(buffer=self.buffer_name, kind=kind.value).inc()


_server_started = False


def start_metrics_http_server(port: int = 8000) -> None:
    """Start the prometheus client HTTP server on the given port (no-op if already started)."""
    global _server_started
    if _server_started:
        return
    start_http_server(int(port))
    _server_started = True
