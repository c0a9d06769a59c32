"""
Configuration management for the virtual pet gesture core.
"""
import yaml
from functools import lru_cache
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass


DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.default.yaml"


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int
    width: int
    height: int
    fps: int


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int
    model_complexity: int
    min_detection_confidence: float
    min_tracking_confidence: float


@dataclass
class ClassifierConfig:
    """Thresholds for turning landmarks into a gesture vector."""
    pinch_ratio: float
    extension_margin: float
    extended_max_curl: float
    fist_min_curl: float
    open_hand_min_fingers: int
    fist_max_fingers: int
    palm_width_floor: float


@dataclass
class ZoneConfig:
    """Pet and bowl capture zones."""
    min_pet_radius_px: float
    palm_near_factor: float
    bowl_x_pct: float
    bowl_y_pct: float
    min_bowl_radius_px: float
    bowl_radius_factor: float


@dataclass
class EventTiming:
    """Cooldown and visible-effect duration of one event kind."""
    cooldown_ms: int
    effect_ms: int


@dataclass
class HighFiveConfig:
    """High-five velocity test settings."""
    min_speed_px_s: float
    min_approach_px: float
    min_dt_ms: float


@dataclass
class InteractionConfig:
    """Interaction state machine configuration."""
    hand_lost_ms: int
    default_pet_x: float
    default_pet_y: float
    toast_ms: int
    events: Dict[str, EventTiming]
    high_five: HighFiveConfig


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool
    show_zones: bool
    window_name: str


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig
    mediapipe: MediaPipeConfig
    classifier: ClassifierConfig
    zones: ZoneConfig
    interaction: InteractionConfig
    display: DisplayConfig


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.
    
    Args:
        path: Path to config file. If None, uses the packaged config.default.yaml
        
    Returns:
        Configuration object with all settings
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)
    
    return _dict_to_config(data)


@lru_cache(maxsize=1)
def default_config() -> Cfg:
    """Shipped defaults, loaded once."""
    return load_config()


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object."""
    camera_data = data['camera']
    camera = CameraConfig(
        index=camera_data['index'],
        width=camera_data['width'],
        height=camera_data['height'],
        fps=camera_data['fps']
    )
    
    mp_data = data['mediapipe']
    mediapipe = MediaPipeConfig(
        max_num_hands=mp_data['max_num_hands'],
        model_complexity=mp_data['model_complexity'],
        min_detection_confidence=mp_data['min_detection_confidence'],
        min_tracking_confidence=mp_data['min_tracking_confidence']
    )
    
    cls_data = data['classifier']
    classifier = ClassifierConfig(
        pinch_ratio=cls_data['pinch_ratio'],
        extension_margin=cls_data['extension_margin'],
        extended_max_curl=cls_data['extended_max_curl'],
        fist_min_curl=cls_data['fist_min_curl'],
        open_hand_min_fingers=cls_data['open_hand_min_fingers'],
        fist_max_fingers=cls_data['fist_max_fingers'],
        palm_width_floor=float(cls_data['palm_width_floor'])
    )
    
    zone_data = data['zones']
    zones = ZoneConfig(
        min_pet_radius_px=zone_data['min_pet_radius_px'],
        palm_near_factor=zone_data['palm_near_factor'],
        bowl_x_pct=zone_data['bowl_x_pct'],
        bowl_y_pct=zone_data['bowl_y_pct'],
        min_bowl_radius_px=zone_data['min_bowl_radius_px'],
        bowl_radius_factor=zone_data['bowl_radius_factor']
    )
    
    ia_data = data['interaction']
    events = {
        name: EventTiming(cooldown_ms=timing['cooldown_ms'], effect_ms=timing['effect_ms'])
        for name, timing in ia_data['events'].items()
    }
    high_five = HighFiveConfig(
        min_speed_px_s=ia_data['high_five']['min_speed_px_s'],
        min_approach_px=ia_data['high_five']['min_approach_px'],
        min_dt_ms=ia_data['high_five']['min_dt_ms']
    )
    interaction = InteractionConfig(
        hand_lost_ms=ia_data['hand_lost_ms'],
        default_pet_x=ia_data['default_pet_x'],
        default_pet_y=ia_data['default_pet_y'],
        toast_ms=ia_data['toast_ms'],
        events=events,
        high_five=high_five
    )
    
    display_data = data['display']
    display = DisplayConfig(
        show_landmarks=display_data['show_landmarks'],
        show_zones=display_data['show_zones'],
        window_name=display_data['window_name']
    )
    
    return Cfg(
        camera=camera,
        mediapipe=mediapipe,
        classifier=classifier,
        zones=zones,
        interaction=interaction,
        display=display
    )
