"""
Test cases for YAML configuration loading.
"""
import tempfile
import unittest
import sys
from pathlib import Path

import yaml

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from virtualpet.config import DEFAULT_CONFIG_PATH, default_config, load_config


class TestConfig(unittest.TestCase):
    """Test configuration loading."""

    def test_default_values(self):
        """Test the packaged defaults match the documented thresholds."""
        cfg = load_config()
        self.assertEqual(cfg.classifier.pinch_ratio, 0.4)
        self.assertEqual(cfg.classifier.extension_margin, 0.07)
        self.assertEqual(cfg.zones.min_pet_radius_px, 50)
        self.assertEqual(cfg.zones.bowl_y_pct, 88)
        self.assertEqual(cfg.interaction.hand_lost_ms, 500)
        self.assertEqual(cfg.interaction.events["feed"].cooldown_ms, 1200)
        self.assertEqual(cfg.interaction.events["feed"].effect_ms, 800)
        self.assertEqual(cfg.interaction.events["tap"].cooldown_ms, 500)
        self.assertEqual(cfg.interaction.events["high_five"].effect_ms, 700)
        self.assertEqual(cfg.interaction.high_five.min_speed_px_s, 900)
        self.assertEqual(cfg.mediapipe.max_num_hands, 2)

    def test_default_config_cached(self):
        self.assertIs(default_config(), default_config())

    def test_missing_file(self):
        """Test that a missing config file raises FileNotFoundError."""
        with self.assertRaises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")

    def test_custom_file(self):
        """Test loading an edited copy of the defaults."""
        with open(DEFAULT_CONFIG_PATH) as f:
            data = yaml.safe_load(f)
        data["interaction"]["hand_lost_ms"] = 250
        data["classifier"]["pinch_ratio"] = 0.3

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "custom.yaml"
            path.write_text(yaml.safe_dump(data))
            cfg = load_config(str(path))

        self.assertEqual(cfg.interaction.hand_lost_ms, 250)
        self.assertEqual(cfg.classifier.pinch_ratio, 0.3)

    def test_missing_key(self):
        """Test that an incomplete file names the missing section."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "broken.yaml"
            path.write_text(yaml.safe_dump({"camera": {}}))
            with self.assertRaises(KeyError):
                load_config(str(path))


if __name__ == '__main__':
    unittest.main()
