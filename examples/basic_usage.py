"""Basic usage example for Circlens."""

from pathlib import Path

import cv2
from circlens import DetectionParams, TrackerState, detect
from circlens.utils.io_handler import prepare_frame
from circlens.utils.visualization import draw_detection


def main():
    """Detect a circle in a single image."""
    # Load image
    image_path = "test_data/frames/sample_frame.jpg"
    image = cv2.imread(image_path)

    if image is None:
        print(f"Error: Could not load image from {image_path}")
        return

    params = DetectionParams()
    frame = prepare_frame(image, params.proc_width)

    print("Detecting circle...")
    circle = detect(frame, params, TrackerState())
    if circle is None:
        print("No circle found")
        return
    print(f"Circle at ({circle.x}, {circle.y}) r={circle.r}px, confidence {circle.score:.0%}")

    output = draw_detection(image, circle, (frame.shape[1], frame.shape[0]))
    output_path = "output/basic_detection.jpg"
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    cv2.imwrite(output_path, output)
    print(f"Results saved to {output_path}")


if __name__ == "__main__":
    main()
