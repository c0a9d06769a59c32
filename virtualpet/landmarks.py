"""
Hand landmark conventions and derived reference points.
"""
from typing import Dict, List, Sequence, Tuple

from .errors import InvalidHandShape
from .geometry import distance, mean_point, midpoint
from .types import Hand, Landmark, Point

NUM_LANDMARKS = 21

WRIST = 0
THUMB_TIP = 4
INDEX_MCP = 5
INDEX_TIP = 8
PINKY_MCP = 17

# finger -> (mcp, pip, dip, tip)
FINGER_JOINTS: Dict[str, Tuple[int, int, int, int]] = {
    "thumb": (1, 2, 3, 4),
    "index": (5, 6, 7, 8),
    "middle": (9, 10, 11, 12),
    "ring": (13, 14, 15, 16),
    "pinky": (17, 18, 19, 20),
}


def validate_hand(landmarks: Sequence) -> List[Landmark]:
    """
    Check the landmark count and normalize each point to an (x, y) tuple.

    Points may carry a third (z) component, which is dropped.

    Raises:
        InvalidHandShape: if the hand does not have exactly 21 landmarks
    """
    if len(landmarks) != NUM_LANDMARKS:
        raise InvalidHandShape(len(landmarks), NUM_LANDMARKS)
    return [(float(p[0]), float(p[1])) for p in landmarks]


def palm_width(landmarks: Hand) -> float:
    """Index MCP to pinky MCP distance in normalized units."""
    return distance(landmarks[INDEX_MCP], landmarks[PINKY_MCP])


def pinch_point(landmarks: Hand) -> Landmark:
    """Midpoint between thumb tip and index tip (normalized)."""
    return midpoint(landmarks[THUMB_TIP], landmarks[INDEX_TIP])


def palm_center(landmarks: Hand) -> Landmark:
    """
    Calculate the center of the palm.

    Uses the wrist, index MCP and pinky MCP, which stay stable while the
    fingers move.
    """
    return mean_point([landmarks[WRIST], landmarks[INDEX_MCP], landmarks[PINKY_MCP]])


def to_pixel(point: Landmark, frame_wh: Tuple[float, float]) -> Point:
    """
    Map a normalized point into the mirrored pixel space of the preview.

    The video is shown horizontally flipped, so x is inverted.
    """
    width, height = frame_wh
    return ((1.0 - point[0]) * width, point[1] * height)
