import logging
import os
import pygame
import cv2
import numpy as np
from datetime import datetime

logger = logging.getLogger(__name__)


def default_output_file(prefix: str = "carve") -> str:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    fname = f"{prefix}_{ts}.mp4"
    if os.path.isdir("recordings"):
        return os.path.join("recordings", fname)
    return fname


def surface_to_frame(view: np.ndarray) -> np.ndarray:
    """pygame array3d is (width, height, RGB); OpenCV wants (height, width, BGR)."""
    frame = np.transpose(view, (1, 0, 2))
    return cv2.cvtColor(np.ascontiguousarray(frame), cv2.COLOR_RGB2BGR)


class VideoRecorder:
    def __init__(self, active=False, output_file=None, fps=30):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

        if self.active and not self.output_file:
            self.output_file = default_output_file()

    def capture_frame(self, surface: pygame.Surface):
        if not self.active:
            return

        width, height = surface.get_size()
        if self.writer is None:
            self.frame_size = (width, height)
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
            logger.info(f"Recording started: {self.output_file}")
        elif (width, height) != self.frame_size:
            # VideoWriter cannot change size mid-stream; resized windows are scaled back
            surface = pygame.transform.smoothscale(surface, self.frame_size)

        self.writer.write(surface_to_frame(pygame.surfarray.array3d(surface)))
        self.frame_count += 1

    def stop(self):
        if self.writer:
            self.writer.release()
            logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")
            self.writer = None
