"""
Proximity of the hand to the pet and the feeding bowl, in pixel space.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import ZoneConfig, default_config
from .geometry import distance
from .landmarks import palm_center, palm_width, pinch_point, to_pixel
from .types import Hand, PetPosition, Point


@dataclass(frozen=True)
class Proximity:
    """Zone membership and the pixel-space points it was computed from."""
    pinch_px: Point
    palm_px: Point
    pet_px: Point
    bowl_px: Point
    near_radius: float
    bowl_radius: float
    near_pet: bool
    palm_near_pet: bool
    near_bowl: bool


class ZoneEvaluator:
    """
    Evaluates the pet and bowl capture zones for one hand.

    The pet radius grows with the on-screen palm width, so a hand close to
    the camera interacts from further away.
    """

    def __init__(self, cfg: Optional[ZoneConfig] = None):
        self.cfg = cfg or default_config().zones

    def pet_pixel(self, pet: PetPosition, frame_wh: Tuple[float, float]) -> Point:
        width, height = frame_wh
        return (pet.x / 100.0 * width, pet.y / 100.0 * height)

    def bowl_pixel(self, frame_wh: Tuple[float, float]) -> Point:
        width, height = frame_wh
        return (self.cfg.bowl_x_pct / 100.0 * width, self.cfg.bowl_y_pct / 100.0 * height)

    def near_radius(self, landmarks: Hand, frame_wh: Tuple[float, float]) -> float:
        width, height = frame_wh
        return max(self.cfg.min_pet_radius_px, palm_width(landmarks) * min(width, height))

    def bowl_radius(self, near_radius: float) -> float:
        return max(self.cfg.min_bowl_radius_px, near_radius * self.cfg.bowl_radius_factor)

    def evaluate(self, landmarks: Hand, pet: PetPosition,
                 frame_wh: Tuple[float, float]) -> Proximity:
        """
        Compute zone membership for the pinch point and the palm center.
        
        Args:
            landmarks: Validated 21-point hand (normalized)
            pet: Current pet position in percent
            frame_wh: Reference frame dimensions (width, height)
        """
        pinch_px = to_pixel(pinch_point(landmarks), frame_wh)
        palm_px = to_pixel(palm_center(landmarks), frame_wh)
        pet_px = self.pet_pixel(pet, frame_wh)
        bowl_px = self.bowl_pixel(frame_wh)
        near_radius = self.near_radius(landmarks, frame_wh)
        bowl_radius = self.bowl_radius(near_radius)

        return Proximity(
            pinch_px=pinch_px,
            palm_px=palm_px,
            pet_px=pet_px,
            bowl_px=bowl_px,
            near_radius=near_radius,
            bowl_radius=bowl_radius,
            near_pet=distance(pinch_px, pet_px) < near_radius,
            palm_near_pet=distance(palm_px, pet_px) < near_radius * self.cfg.palm_near_factor,
            near_bowl=distance(pinch_px, bowl_px) < bowl_radius,
        )
