"""
Landmark provider backed by MediaPipe Hands.
"""
import cv2
import mediapipe as mp
import numpy as np
from typing import List, Tuple

from .config import MediaPipeConfig
from .types import Frame, Landmark


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""
    
    def __init__(self, cfg: MediaPipeConfig):
        """
        Initialize the hands tracker.
        
        Args:
            cfg: MediaPipe settings (hand count, model complexity, confidences)
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=cfg.max_num_hands,
            model_complexity=cfg.model_complexity,
            min_detection_confidence=cfg.min_detection_confidence,
            min_tracking_confidence=cfg.min_tracking_confidence
        )
    
    def process(self, frame_bgr: np.ndarray, timestamp_ms: float) -> Frame:
        """
        Process a frame and return every detected hand.
        
        Args:
            frame_bgr: Input frame in BGR format (not mirrored)
            timestamp_ms: Capture time of the frame
            
        Returns:
            Frame with one list of 21 (x, y) coordinates in [0..1] per hand
        """
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)
        
        hands: List[List[Landmark]] = []
        for hand_landmarks in results.multi_hand_landmarks or []:
            hands.append([(lm.x, lm.y) for lm in hand_landmarks.landmark])
        
        return Frame(hands=tuple(hands), timestamp_ms=timestamp_ms)
    
    def close(self) -> None:
        self.hands.close()


def draw_landmarks(frame: np.ndarray, landmarks: List[Tuple[float, float]]) -> np.ndarray:
    """
    Draw hand landmarks on a mirrored preview frame.
    
    Args:
        frame: Preview frame (already flipped horizontally)
        landmarks: List of (x, y) coordinates in [0..1] range
        
    Returns:
        Frame with landmarks drawn
    """
    height, width = frame.shape[:2]
    
    for x, y in landmarks:
        px = int((1 - x) * width)
        py = int(y * height)
        cv2.circle(frame, (px, py), 3, (0, 255, 0), -1)
    
    return frame
