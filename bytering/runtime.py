# FILE: bytering/runtime.py
# ------------------------------------------------------------------------------
import logging
from typing import Optional

from bytering.buffer.ring import RingBuffer
from bytering.errors.fatal import BackendInitializationError
from bytering.log_config import setup_logging
from bytering.metrics.exporter import RingMetricsExporter, start_metrics_http_server
from bytering.settings import Settings, load_settings

logger = logging.getLogger("bytering.runtime")


class Runtime:
    """Builds a RingBuffer (plus logging and metrics) from settings."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings
        self.buffer = None

    def initialize(self) -> RingBuffer:
        if self.settings is None:
            self.settings = load_settings()
        setup_logging("bytering", self.settings.logging)
        buffer_cfg = self.settings.buffer
        metrics_cfg = self.settings.metrics

        exporter = None
        if metrics_cfg.enabled:
            exporter = RingMetricsExporter(buffer_cfg.name)
            if metrics_cfg.port is not None:
                start_metrics_http_server(metrics_cfg.port)
                logger.info("Metrics exposed on port %s", metrics_cfg.port)

        logger.info("Initializing ring buffer: %s", buffer_cfg.name)
        self.buffer = RingBuffer(
            buffer_cfg.capacity,
            buffer_cfg.policy,
            name=buffer_cfg.name,
            exporter=exporter,
        )
        return self.buffer

    def get_buffer(self) -> RingBuffer:
        if self.buffer is None:
            raise BackendInitializationError("Not Initialized")
        return self.buffer

    def shutdown(self) -> None:
        if self.buffer is not None:
            self.buffer.close()
