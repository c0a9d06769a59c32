"""
Interaction state machine that turns per-frame gestures into pet events.
"""
import copy
import logging
import random
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from .classifier import classify_hand, neutral_gesture
from .config import Cfg, default_config
from .errors import InvalidHandShape
from .geometry import clamp, distance
from .landmarks import validate_hand
from .types import (
    Event, EventKind, Frame, FrameResult, GestureState, InteractionState,
    PalmSample, PetPosition,
)
from .zones import Proximity, ZoneEvaluator

logger = logging.getLogger(__name__)

PET_MESSAGES: Tuple[str, ...] = (
    "Purr... that feels nice!",
    "So comfy!",
    "Meow! More please!",
    "Happy pet!",
)

FINGER_MESSAGES: Dict[str, str] = {
    "thumb": "Thumbs up!",
    "middle": "Hey, that's rude!",
    "ring": "Shiny!",
    "pinky": "Pinky promise!",
}

# Flags driven by effect timers rather than by a per-frame condition
EFFECT_FLAGS: Tuple[str, ...] = ("feeding", "poking", "high_fiving")


class CooldownGate:
    """
    Per-key minimum interval between firings.

    Works on the ``last_event_time`` mapping of an InteractionState, so the
    gate carries no state of its own.
    """

    def __init__(self, last_fired: Dict[str, float]):
        self.last_fired = last_fired

    def ready(self, key: str, now_ms: float, cooldown_ms: float) -> bool:
        last = self.last_fired.get(key)
        return last is None or now_ms - last > cooldown_ms

    def try_fire(self, key: str, now_ms: float, cooldown_ms: float) -> bool:
        """Record a firing and return True if the cooldown has elapsed."""
        if not self.ready(key, now_ms, cooldown_ms):
            return False
        self.last_fired[key] = now_ms
        return True


class InteractionStateMachine:
    """
    Advances the pet interaction model once per detector frame.

    Features:
    - Pinch-to-grab drag with a rigid offset captured at grab start
    - Bowl proximity takes priority over grabbing (pinch over bowl feeds)
    - Cooldown-gated events: feed, pet, poke, tap, per-finger, high-five
    - Hand-lost hysteresis before everything is reset

    The caller must feed frames sequentially in timestamp order; all timing
    comes from ``Frame.timestamp_ms``.
    """

    def __init__(self, cfg: Optional[Cfg] = None, rng: Optional[random.Random] = None):
        """Initialize the state machine with configuration and a random source."""
        self.cfg = cfg or default_config()
        self.zones = ZoneEvaluator(self.cfg.zones)
        self.rng = rng or random.Random()
        self.reset()

    def reset(self) -> None:
        """Return to the session-start state."""
        ia = self.cfg.interaction
        self.state = InteractionState()
        self.pet = PetPosition(x=ia.default_pet_x, y=ia.default_pet_y)
        self.gesture: GestureState = neutral_gesture()

    def process_frame(self, frame: Frame, frame_wh: Tuple[float, float]) -> FrameResult:
        """
        Process one frame and return the updated pet, state and fired events.

        Args:
            frame: Detected hands plus capture timestamp (ms)
            frame_wh: Reference frame dimensions (width, height) in pixels

        Returns:
            FrameResult snapshot; mutating it does not affect the machine
        """
        state = copy.deepcopy(self.state)
        pet = replace(self.pet)
        events: List[Event] = []

        try:
            gesture = self._advance(state, pet, frame, frame_wh, events)
        except (ValueError, TypeError, IndexError, ZeroDivisionError):
            logger.warning("Dropping frame at %.0fms, keeping previous state",
                           frame.timestamp_ms, exc_info=True)
            self.gesture = neutral_gesture()
            return self._result([])

        self.state, self.pet, self.gesture = state, pet, gesture
        return self._result(events)

    def handle_tap(self, now_ms: float) -> List[Event]:
        """Direct tap or click on the pet."""
        events: List[Event] = []
        self._fire(self.state, "tap", EventKind.TAP, now_ms, events,
                   message="Boop!", effect_flag="poking")
        self._update_effects(self.state, now_ms)
        return events

    # ------------------------------------------------------------------

    def _advance(self, state: InteractionState, pet: PetPosition, frame: Frame,
                 frame_wh: Tuple[float, float], events: List[Event]) -> GestureState:
        now = frame.timestamp_ms
        landmarks = None
        if frame.hands:
            try:
                landmarks = validate_hand(frame.hands[0])
            except InvalidHandShape as e:
                logger.warning("Ignoring hand at %.0fms: %s", now, e)

        if landmarks is None:
            self._hand_absent(state, now)
            self._update_effects(state, now)
            return neutral_gesture()

        state.hand_visible = True
        state.hand_count = frame.hand_count
        state.last_hand_seen_time = now

        gesture = classify_hand(landmarks, self.cfg.classifier)
        prox = self.zones.evaluate(landmarks, pet, frame_wh)

        self._update_drag(state, pet, gesture, prox, frame_wh, now, events)
        if state.grabbing:
            state.petting = False
        else:
            self._update_hand_events(state, gesture, prox, now, events)

        # Always sampled so velocity is measured against the previous frame
        state.last_palm_sample = PalmSample(prox.palm_px[0], prox.palm_px[1], now)
        self._update_effects(state, now)
        return gesture

    def _hand_absent(self, state: InteractionState, now: float) -> None:
        # Reset once per loss; later absent frames leave tap effects alone
        if not state.hand_visible:
            return
        if now - state.last_hand_seen_time <= self.cfg.interaction.hand_lost_ms:
            return

        logger.debug("Hand lost at %.0fms, resetting interaction", now)
        state.hand_visible = False
        state.hand_count = 0
        state.grabbing = False
        state.petting = False
        state.feeding = False
        state.poking = False
        state.high_fiving = False
        state.grab_offset = None
        state.last_palm_sample = None
        state.effect_until.clear()

    def _update_drag(self, state: InteractionState, pet: PetPosition, gesture: GestureState,
                     prox: Proximity, frame_wh: Tuple[float, float], now: float,
                     events: List[Event]) -> None:
        if not state.grabbing and gesture.pinching:
            if prox.near_bowl:
                self._fire(state, "feed", EventKind.FEED, now, events,
                           message="Yum!", effect_flag="feeding")
            elif prox.near_pet:
                state.grabbing = True
                state.grab_offset = (prox.pet_px[0] - prox.pinch_px[0],
                                     prox.pet_px[1] - prox.pinch_px[1])
                logger.debug("Grab started at %.0fms, offset=%s", now, state.grab_offset)

        if not state.grabbing:
            return

        if not gesture.pinching:
            state.grabbing = False
            state.grab_offset = None
            logger.debug("Grab released at %.0fms", now)
            return

        width, height = frame_wh
        dx, dy = state.grab_offset
        pet.x = clamp((prox.pinch_px[0] + dx) / width * 100, 0.0, 100.0)
        pet.y = clamp((prox.pinch_px[1] + dy) / height * 100, 0.0, 100.0)

    def _update_hand_events(self, state: InteractionState, gesture: GestureState,
                            prox: Proximity, now: float, events: List[Event]) -> None:
        free_hand = not gesture.pinching

        petting = gesture.open_hand and free_hand and prox.palm_near_pet
        state.petting = petting
        if petting:
            self._fire(state, "pet", EventKind.PET, now, events,
                       message=self.rng.choice(PET_MESSAGES))
            if state.last_palm_sample is not None and self._is_high_five(state.last_palm_sample, prox, now):
                self._fire(state, "high_five", EventKind.HIGH_FIVE, now, events,
                           message="High five!", effect_flag="high_fiving")

        if gesture.pointing and free_hand and prox.near_pet:
            self._fire(state, "poke", EventKind.POKE, now, events, message="Boop!")

        if free_hand and prox.near_pet and len(gesture.extended_fingers) == 1:
            (finger,) = gesture.extended_fingers
            if finger != "index":
                self._fire(state, f"finger.{finger}", EventKind.FINGER, now, events,
                           message=FINGER_MESSAGES[finger], finger=finger,
                           effect_flag="poking")

    def _is_high_five(self, prev: PalmSample, prox: Proximity, now: float) -> bool:
        """Palm moving fast and towards the pet since the previous frame."""
        hf = self.cfg.interaction.high_five
        dt = max(hf.min_dt_ms, now - prev.t_ms) / 1000.0
        speed = distance((prev.x, prev.y), prox.palm_px) / dt
        approach = distance((prev.x, prev.y), prox.pet_px) - distance(prox.palm_px, prox.pet_px)
        return approach > hf.min_approach_px and speed > hf.min_speed_px_s

    def _fire(self, state: InteractionState, key: str, kind: EventKind, now: float,
              events: List[Event], message: Optional[str] = None,
              finger: Optional[str] = None, effect_flag: Optional[str] = None) -> bool:
        timing = self.cfg.interaction.events[kind.value]
        if not CooldownGate(state.last_event_time).try_fire(key, now, timing.cooldown_ms):
            return False

        if effect_flag is not None and timing.effect_ms > 0:
            state.effect_until[effect_flag] = now + timing.effect_ms
        events.append(Event(kind=kind, timestamp_ms=now, message=message, finger=finger,
                            display_ms=self.cfg.interaction.toast_ms))
        logger.debug("Fired %s at %.0fms: %s", kind.value, now, message)
        return True

    def _update_effects(self, state: InteractionState, now: float) -> None:
        for flag in EFFECT_FLAGS:
            until = state.effect_until.get(flag)
            setattr(state, flag, until is not None and now < until)

    def _result(self, events: List[Event]) -> FrameResult:
        return FrameResult(
            pet_position=replace(self.pet),
            interaction=copy.deepcopy(self.state),
            gesture=self.gesture,
            events=events,
        )
