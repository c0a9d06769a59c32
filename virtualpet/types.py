"""
Type definitions for the virtual pet gesture core.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Protocol, Sequence, Tuple, runtime_checkable


Landmark = Tuple[float, float]  # normalized (x, y) in [0..1]
Hand = Sequence[Landmark]
Point = Tuple[float, float]  # pixel space

FINGERS: Tuple[str, ...] = ("thumb", "index", "middle", "ring", "pinky")


@dataclass(frozen=True)
class Frame:
    """One detector result: 0..N hands plus the capture timestamp in milliseconds."""
    hands: Tuple[Hand, ...]
    timestamp_ms: float

    @property
    def hand_count(self) -> int:
        return len(self.hands)


@dataclass(frozen=True)
class GestureState:
    """Gesture vector recomputed from hand 0 on every frame."""
    pinching: bool
    open_hand: bool
    fist: bool
    pointing: bool
    extended_fingers: FrozenSet[str]
    curl: Dict[str, float]
    pinch_ratio: float = 0.0


@dataclass
class PetPosition:
    """Pet position in percent of the reference frame (0..100 on both axes)."""
    x: float = 50.0
    y: float = 80.0


class EventKind(str, Enum):
    """Kinds of semantic events the interaction machine can fire."""
    FEED = "feed"
    PET = "pet"
    POKE = "poke"
    TAP = "tap"
    FINGER = "finger"
    HIGH_FIVE = "high_five"


@dataclass(frozen=True)
class Event:
    """A fired interaction event with an optional toast message."""
    kind: EventKind
    timestamp_ms: float
    message: Optional[str] = None
    finger: Optional[str] = None
    display_ms: int = 1200


@dataclass(frozen=True)
class PalmSample:
    """Palm center in pixel space at a given frame time."""
    x: float
    y: float
    t_ms: float


@dataclass
class InteractionState:
    """Mutable interaction bookkeeping owned by the state machine."""
    grabbing: bool = False
    petting: bool = False
    feeding: bool = False
    poking: bool = False
    high_fiving: bool = False
    hand_visible: bool = False
    hand_count: int = 0
    grab_offset: Optional[Point] = None  # pixel space, valid only while grabbing
    last_event_time: Dict[str, float] = field(default_factory=dict)
    effect_until: Dict[str, float] = field(default_factory=dict)
    last_palm_sample: Optional[PalmSample] = None
    last_hand_seen_time: Optional[float] = None


@dataclass(frozen=True)
class FrameResult:
    """Everything the presentation layer needs after one frame."""
    pet_position: PetPosition
    interaction: InteractionState
    gesture: GestureState
    events: List[Event]


@runtime_checkable
class LandmarkProviderProto(Protocol):
    """Source of detector frames (camera + hand landmark model)."""

    def process(self, frame_bgr, timestamp_ms: float) -> Frame:
        """Run detection on an image and return the detected hands."""
        ...


@runtime_checkable
class PresentationSinkProto(Protocol):
    """Abstract protocol for sinks that render frame results."""

    async def present(self, result: FrameResult) -> None:
        """Render the pet, flags and newly fired events."""
        ...
