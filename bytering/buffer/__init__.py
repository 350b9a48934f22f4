from bytering.buffer.layout import SplitSpan, split_span
from bytering.buffer.policy import OverflowPolicy
from bytering.buffer.ring import RingBuffer

__all__ = ["RingBuffer", "OverflowPolicy", "SplitSpan", "split_span"]
