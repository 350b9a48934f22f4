from bytering.metrics.counters import BufferCounters
from bytering.metrics.exporter import RingMetricsExporter, start_metrics_http_server

__all__ = ["BufferCounters", "RingMetricsExporter", "start_metrics_http_server"]
