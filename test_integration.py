"""
Integration test to verify all components can be imported and work together.
"""
import asyncio
import random
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from virtualpet.config import load_config
from virtualpet.interaction import InteractionStateMachine
from virtualpet.sink_mock import MockSink
from virtualpet.types import EventKind, Frame, PresentationSinkProto


def _fist_at_bowl():
    """A pinching hand whose pinch point sits on the bowl (320, 422.4) in 640x480."""
    hand = [(0.5, 0.5)] * 21
    hand[5] = (0.44, 0.62)
    hand[17] = (0.56, 0.63)
    hand[4] = (0.495, 0.88)
    hand[8] = (0.505, 0.88)
    return hand


async def run_integration() -> bool:
    """Test that all components can be imported and used together."""
    print("Testing integration of virtual pet gesture components...")

    print("\n1. Testing configuration loading...")
    config = load_config()
    print(f"✓ Config loaded: camera {config.camera.width}x{config.camera.height}, "
          f"hand lost after {config.interaction.hand_lost_ms}ms")

    print("\n2. Testing state machine with mock sink...")
    machine = InteractionStateMachine(config, rng=random.Random(0))
    sink = MockSink()
    assert isinstance(sink, PresentationSinkProto)

    frame_wh = (config.camera.width, config.camera.height)
    frames = [
        Frame(hands=(_fist_at_bowl(),), timestamp_ms=0.0),
        Frame(hands=(), timestamp_ms=100.0),
        Frame(hands=(), timestamp_ms=700.0),
    ]
    for frame in frames:
        await sink.present(machine.process_frame(frame, frame_wh))

    assert sink.frame_count == 3
    assert sink.event_counts[EventKind.FEED] == 1
    assert not sink.last_result.interaction.hand_visible
    print(f"✓ Sink received {sink.frame_count} frames, events: {dict(sink.event_counts)}")

    print("\n✅ All integration tests passed!")
    return True


def test_integration():
    assert asyncio.run(run_integration())


if __name__ == "__main__":
    success = asyncio.run(run_integration())
    sys.exit(0 if success else 1)
