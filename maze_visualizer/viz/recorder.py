import os
import logging
import pygame
import cv2
import numpy as np
from datetime import datetime

logger = logging.getLogger(__name__)

def default_clip_name(label: str = "maze", directory: str = "recordings") -> str:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return os.path.join(directory, f"{label}_{ts}.mp4")

class VideoRecorder:
    """
    Writes the visualizer window to an mp4 clip, one video frame per rendered
    frame. fps must match the render loop or the clip plays at the wrong speed.
    """

    def __init__(self, active=False, output_file=None, fps=30):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

    def surface_to_frame(self, surface: pygame.Surface) -> np.ndarray:
        # array3d is (width, height, 3) RGB, the writer wants (height, width, 3) BGR
        view = pygame.surfarray.array3d(surface)
        frame = np.ascontiguousarray(np.transpose(view, (1, 0, 2)))
        frame = cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)

        # Window resizes are scaled back to the size the clip was opened with
        if self.frame_size is not None and (frame.shape[1], frame.shape[0]) != self.frame_size:
            frame = cv2.resize(frame, self.frame_size)
        return frame

    def open(self, frame_size):
        if not self.output_file:
            self.output_file = default_clip_name()
        directory = os.path.dirname(self.output_file)
        if directory:
            os.makedirs(directory, exist_ok=True)

        self.frame_size = frame_size
        fourcc = cv2.VideoWriter_fourcc(*'mp4v')
        self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, frame_size)
        logger.info(f"Recording started: {self.output_file} at {self.fps} fps")

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        if self.writer is None:
            self.open(surface.get_size())

        self.writer.write(self.surface_to_frame(surface))
        self.frame_count += 1

    def stop(self):
        if self.writer:
            self.writer.release()
            logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")
            self.writer = None
