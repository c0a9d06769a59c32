"""
Test cases for pet and bowl zone evaluation.
"""
import unittest
import sys
from pathlib import Path

# Add project root and this directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from virtualpet.config import load_config
from virtualpet.types import PetPosition
from virtualpet.zones import ZoneEvaluator
from synthetic import FRAME_WH, make_hand, open_hand, pinch_hand, place_palm, place_pinch


class TestZoneEvaluator(unittest.TestCase):
    """Test proximity checks in pixel space."""

    def setUp(self):
        """Set up test configuration."""
        self.zones = ZoneEvaluator(load_config().zones)
        self.pet = PetPosition(x=50.0, y=40.0)  # (320, 192) px

    def test_pet_and_bowl_pixels(self):
        """Test percent-to-pixel conversion of the fixed zones."""
        self.assertEqual(self.zones.pet_pixel(self.pet, FRAME_WH), (320.0, 192.0))
        bowl = self.zones.bowl_pixel(FRAME_WH)
        self.assertAlmostEqual(bowl[0], 320.0)
        self.assertAlmostEqual(bowl[1], 422.4)

    def test_radius_scales_with_palm(self):
        """Test that the pet radius follows the palm width in pixels."""
        hand = make_hand()
        # palm width ~0.1204 * min(640, 480)
        self.assertAlmostEqual(self.zones.near_radius(hand, FRAME_WH), 57.8, places=1)
        # a small palm falls back to the minimum radius
        self.assertEqual(self.zones.near_radius(hand, (200, 200)), 50)
        self.assertEqual(self.zones.bowl_radius(57.8), 60)
        self.assertEqual(self.zones.bowl_radius(200.0), 100.0)

    def test_pinch_near_pet(self):
        """Test pinch point inside and outside the pet radius."""
        prox = self.zones.evaluate(place_pinch(pinch_hand(), 330, 200), self.pet, FRAME_WH)
        self.assertTrue(prox.near_pet)
        self.assertFalse(prox.near_bowl)
        self.assertAlmostEqual(prox.pinch_px[0], 330.0)
        self.assertAlmostEqual(prox.pinch_px[1], 200.0)

        prox = self.zones.evaluate(place_pinch(pinch_hand(), 420, 200), self.pet, FRAME_WH)
        self.assertFalse(prox.near_pet)

    def test_pinch_near_bowl(self):
        """Test bowl membership around its fixed position."""
        prox = self.zones.evaluate(place_pinch(pinch_hand(), 330, 422.4), self.pet, FRAME_WH)
        self.assertTrue(prox.near_bowl)
        self.assertAlmostEqual(prox.bowl_radius, 60.0)

    def test_palm_near_pet_uses_smaller_radius(self):
        """Test the palm radius is 90% of the pet radius."""
        hand = open_hand()
        radius = self.zones.near_radius(hand, FRAME_WH)
        inside = self.zones.evaluate(place_palm(hand, 320 + radius * 0.85, 192), self.pet, FRAME_WH)
        outside = self.zones.evaluate(place_palm(hand, 320 + radius * 0.95, 192), self.pet, FRAME_WH)
        self.assertTrue(inside.palm_near_pet)
        self.assertFalse(outside.palm_near_pet)


if __name__ == '__main__':
    unittest.main()
