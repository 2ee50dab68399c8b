"""I/O handling for video frames and JSON output."""

import cv2
import json
import numpy as np
from pathlib import Path
from typing import Dict, Optional


def prepare_frame(image: np.ndarray, proc_width: int) -> np.ndarray:
    """
    Resize a BGR camera frame to the processing width and convert to RGBA.

    Args:
        image: (H, W, 3) BGR image as returned by OpenCV
        proc_width: Target processing width in pixels

    Returns:
        (proc_h, proc_width, 4) uint8 RGBA frame, aspect ratio preserved
    """
    h, w = image.shape[:2]
    aspect = w / h if h > 0 else 4 / 3
    proc_h = max(1, int(round(proc_width / aspect)))
    resized = cv2.resize(image, (proc_width, proc_h), interpolation=cv2.INTER_AREA)
    return cv2.cvtColor(resized, cv2.COLOR_BGR2RGBA)


class VideoReader:
    """Read video frames."""

    def __init__(self, video_path: str):
        self.video_path = video_path
        self.cap = cv2.VideoCapture(video_path)
        if not self.cap.isOpened():
            raise ValueError(f"Cannot open video source {video_path}")
        self.fps = self.cap.get(cv2.CAP_PROP_FPS)
        self.frame_count = int(self.cap.get(cv2.CAP_PROP_FRAME_COUNT))
        self.width = int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        self.height = int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT))

    def read_frame(self, frame_number: Optional[int] = None) -> Optional[np.ndarray]:
        """Read a specific frame or next frame."""
        if frame_number is not None:
            self.cap.set(cv2.CAP_PROP_POS_FRAMES, frame_number)

        ret, frame = self.cap.read()
        return frame if ret else None

    def __iter__(self):
        while True:
            frame = self.read_frame()
            if frame is None:
                return
            yield frame

    def release(self):
        """Release video capture."""
        self.cap.release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()


class JSONWriter:
    """Write detection results to JSON."""

    @staticmethod
    def save_results(output_dict: Dict, output_path: str, indent: int = 2):
        """Save results to JSON file."""
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(output_dict, f, indent=indent)

    @staticmethod
    def load_results(input_path: str) -> Dict:
        """Load results from JSON file."""
        with open(input_path, 'r') as f:
            return json.load(f)
