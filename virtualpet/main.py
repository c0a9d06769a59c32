"""
Demo driver: webcam -> hand landmarks -> interaction core -> OpenCV overlay.
"""
import asyncio
import logging
import time
from typing import List, Optional, Tuple

import cv2

from .config import load_config
from .geometry import distance
from .interaction import InteractionStateMachine
from .sink_mock import MockSink
from .tracker import HandsTracker, draw_landmarks
from .types import Event, FrameResult

logger = logging.getLogger(__name__)


class VirtualPetApp:
    """Main application class for the gesture-driven virtual pet."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize the application with configuration."""
        self.config = load_config(config_path)
        self.tracker = HandsTracker(self.config.mediapipe)
        self.machine = InteractionStateMachine(self.config)
        self.sink = MockSink()
        self.frame_wh: Tuple[int, int] = (self.config.camera.width, self.config.camera.height)
        self.toast: Optional[Event] = None
        self.pending_taps: List[Tuple[int, int]] = []

        # Initialize camera
        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")

    def _on_mouse(self, event, x, y, flags, param):
        if event == cv2.EVENT_LBUTTONDOWN:
            self.pending_taps.append((x, y))

    def _handle_taps(self, now_ms: float) -> List[Event]:
        """Clicks landing on the pet count as taps."""
        events: List[Event] = []
        pet_px = self.machine.zones.pet_pixel(self.machine.pet, self.frame_wh)
        for tap in self.pending_taps:
            if distance(tap, pet_px) < self.config.zones.min_pet_radius_px:
                events.extend(self.machine.handle_tap(now_ms))
        self.pending_taps.clear()
        return events

    def _draw(self, frame, result: FrameResult, now_ms: float) -> None:
        zones = self.machine.zones
        pet_x, pet_y = (int(v) for v in zones.pet_pixel(result.pet_position, self.frame_wh))
        bowl_x, bowl_y = (int(v) for v in zones.bowl_pixel(self.frame_wh))
        state = result.interaction

        if self.config.display.show_zones:
            cv2.circle(frame, (bowl_x, bowl_y), int(self.config.zones.min_bowl_radius_px), (0, 165, 255), 2)

        pet_color = (255, 0, 255)
        if state.grabbing:
            pet_color = (0, 255, 255)
        elif state.feeding or state.high_fiving:
            pet_color = (0, 255, 0)
        elif state.petting or state.poking:
            pet_color = (255, 200, 0)
        cv2.circle(frame, (pet_x, pet_y), 30, pet_color, -1)

        for event in result.events:
            if event.message:
                self.toast = event
        if self.toast and now_ms - self.toast.timestamp_ms < self.toast.display_ms:
            cv2.putText(frame, self.toast.message, (pet_x - 60, pet_y - 45),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.7, (255, 255, 255), 2)

        gesture = result.gesture
        status = f"Hands: {state.hand_count}" if state.hand_visible else "No hand detected"
        flags = [name for name, on in (("PINCH", gesture.pinching), ("OPEN", gesture.open_hand),
                                       ("FIST", gesture.fist), ("POINT", gesture.pointing)) if on]
        cv2.putText(frame, status, (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.7, (255, 255, 255), 2)
        cv2.putText(frame, " ".join(flags), (10, 60), cv2.FONT_HERSHEY_SIMPLEX, 0.6, (0, 255, 0), 2)
        cv2.putText(frame, "Press 'q' to quit", (10, frame.shape[0] - 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)

    async def run(self):
        """Run the main application loop."""
        window = self.config.display.window_name
        print(f"Starting {window}")
        print("🐾 Interactions:")
        print("  - Pinch near the pet = Grab and drag")
        print("  - Pinch over the bowl = Feed")
        print("  - Open palm over the pet = Pet (swing in fast for a high five)")
        print("  - Point at the pet = Poke")
        print("Press 'q' to quit")

        cv2.namedWindow(window)
        cv2.setMouseCallback(window, self._on_mouse)

        while True:
            ret, frame = self.cap.read()
            if not ret:
                print("Failed to read frame from camera")
                break

            # One detection in flight at a time: the loop blocks on it
            now_ms = time.time() * 1000.0
            detected = self.tracker.process(frame, now_ms)
            self.frame_wh = (frame.shape[1], frame.shape[0])

            tap_events = self._handle_taps(now_ms)
            result = self.machine.process_frame(detected, self.frame_wh)
            if tap_events:
                result = FrameResult(
                    pet_position=result.pet_position,
                    interaction=result.interaction,
                    gesture=result.gesture,
                    events=tap_events + result.events,
                )
            await self.sink.present(result)

            preview = cv2.flip(frame, 1)
            if self.config.display.show_landmarks:
                for hand in detected.hands:
                    draw_landmarks(preview, hand)
            self._draw(preview, result, now_ms)
            cv2.imshow(window, preview)

            if cv2.waitKey(1) & 0xFF == ord('q'):
                break

        self.cap.release()
        self.tracker.close()
        cv2.destroyAllWindows()


async def main():
    """Entry point for the application."""
    import sys

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    config_path = sys.argv[1] if len(sys.argv) > 1 else None

    try:
        app = VirtualPetApp(config_path)
        await app.run()
    except KeyboardInterrupt:
        print("\nApplication interrupted by user")
    except (RuntimeError, FileNotFoundError) as e:
        print(f"Error: {e}")


def cli():
    asyncio.run(main())


if __name__ == "__main__":
    cli()
