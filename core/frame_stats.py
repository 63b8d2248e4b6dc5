from collections import deque

from settings import FPS_SAMPLES


class FrameStats:
    """Rolling frames-per-second average over the last ``samples`` frames."""

    def __init__(self, samples=FPS_SAMPLES):
        self._fps_samples = deque(maxlen=samples)
        self.delta_time = 0.0
        self.fps = 0.0

    def tick(self, delta_time):
        self.delta_time = delta_time
        if delta_time <= 0:
            # Zero-length frame (e.g. first tick); keep the previous average
            return self.average_fps
        self.fps = 1.0 / delta_time
        self._fps_samples.append(self.fps)
        return self.average_fps

    @property
    def average_fps(self):
        if not self._fps_samples:
            return 0.0
        return sum(self._fps_samples) / len(self._fps_samples)
