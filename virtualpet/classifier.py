"""
Gesture classification: one hand's 21 landmarks -> GestureState.
"""
import math
from typing import Optional, Sequence

from .config import ClassifierConfig, default_config
from .geometry import angle_between, clamp01, distance
from .landmarks import FINGER_JOINTS, INDEX_TIP, THUMB_TIP, WRIST, palm_width, validate_hand
from .types import FINGERS, GestureState


def neutral_gesture() -> GestureState:
    """All flags off, every finger straight."""
    return GestureState(
        pinching=False,
        open_hand=False,
        fist=False,
        pointing=False,
        extended_fingers=frozenset(),
        curl={finger: 0.0 for finger in FINGERS},
    )


def finger_curl(landmarks, finger: str) -> float:
    """
    Bend of a finger's middle joint, normalized to [0, 1].

    0 means the MCP->PIP and PIP->TIP segments are collinear, 1 means the
    tip is folded back onto the first segment.
    """
    mcp, pip, _, tip = FINGER_JOINTS[finger]
    bend = angle_between(landmarks[mcp], landmarks[pip], landmarks[pip], landmarks[tip])
    return clamp01(bend / math.pi)


def classify_hand(landmarks: Sequence, cfg: Optional[ClassifierConfig] = None) -> GestureState:
    """
    Compute the gesture vector for one hand.
    
    Args:
        landmarks: 21 normalized (x, y[, z]) points
        cfg: Classifier thresholds, defaults to the packaged config
        
    Returns:
        GestureState for this hand
        
    Raises:
        InvalidHandShape: if the hand does not have exactly 21 landmarks
    """
    cfg = cfg or default_config().classifier
    lm = validate_hand(landmarks)

    width = max(palm_width(lm), cfg.palm_width_floor)
    pinch_ratio = distance(lm[THUMB_TIP], lm[INDEX_TIP]) / width
    pinching = pinch_ratio < cfg.pinch_ratio

    wrist = lm[WRIST]
    curl = {}
    extended = {}
    for finger in FINGERS:
        _, pip, _, tip = FINGER_JOINTS[finger]
        curl[finger] = finger_curl(lm, finger)
        # Both checks guard against hand rotation alone faking an extension
        raised = distance(wrist, lm[tip]) - distance(wrist, lm[pip]) > cfg.extension_margin
        extended[finger] = raised and curl[finger] < cfg.extended_max_curl

    extended_fingers = frozenset(f for f in FINGERS if extended[f])
    open_hand = len(extended_fingers) >= cfg.open_hand_min_fingers
    fist = (len(extended_fingers) <= cfg.fist_max_fingers
            and all(c > cfg.fist_min_curl for c in curl.values()))
    pointing = (extended["index"] and not extended["middle"]
                and not extended["ring"] and not extended["pinky"])

    return GestureState(
        pinching=pinching,
        open_hand=open_hand,
        fist=fist,
        pointing=pointing,
        extended_fingers=extended_fingers,
        curl=curl,
        pinch_ratio=pinch_ratio,
    )
