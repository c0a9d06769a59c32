"""
Virtual Pet Gesture Core

Turns a live stream of hand landmarks into gesture classifications and
debounced pet interactions (grab, feed, pet, poke, high five, finger gestures).
"""

__version__ = "0.1.0"

from .types import (
    Frame, GestureState, PetPosition, InteractionState, Event, EventKind, FrameResult,
    LandmarkProviderProto, PresentationSinkProto,
)
from .errors import PetGestureError, InvalidHandShape, DegenerateGeometry
from .config import load_config, default_config, Cfg
from .classifier import classify_hand, neutral_gesture
from .zones import ZoneEvaluator, Proximity
from .interaction import InteractionStateMachine, CooldownGate
from .sink_mock import MockSink

__all__ = [
    "Frame",
    "GestureState",
    "PetPosition",
    "InteractionState",
    "Event",
    "EventKind",
    "FrameResult",
    "LandmarkProviderProto",
    "PresentationSinkProto",
    "PetGestureError",
    "InvalidHandShape",
    "DegenerateGeometry",
    "load_config",
    "default_config",
    "Cfg",
    "classify_hand",
    "neutral_gesture",
    "ZoneEvaluator",
    "Proximity",
    "InteractionStateMachine",
    "CooldownGate",
    "MockSink",
]
