"""
Mock presentation sink for exercising the gesture core without a display.
"""
import logging
from collections import Counter
from typing import Optional

from .types import FrameResult

logger = logging.getLogger(__name__)


class MockSink:
    """Mock sink that logs events instead of rendering them."""
    
    def __init__(self):
        """Initialize the mock sink."""
        self.frame_count = 0
        self.event_counts: Counter = Counter()
        self.last_result: Optional[FrameResult] = None
    
    async def present(self, result: FrameResult) -> None:
        """Log fired events and remember the latest result."""
        self.frame_count += 1
        self.last_result = result
        for event in result.events:
            self.event_counts[event.kind] += 1
            logger.info("[MockSink] %s: %s (frame #%d)", event.kind.value, event.message, self.frame_count)
    
    def reset_counters(self) -> None:
        """Reset counters for testing."""
        self.frame_count = 0
        self.event_counts.clear()
        self.last_result = None
