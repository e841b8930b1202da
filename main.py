import logging
import os
import time

import cv2

from utils.image_io import load_points
from detectors.hough_engine import HoughTransform
from visualization.save_outputs import save_all_outputs

from config import (
    INPUT_IMAGE,
    BACKGROUND_IMAGE,
    OUTPUT_FOLDER,
    ACCUMULATOR_IMAGE,
    OUTPUT_IMAGE,
    OUTPUT_SMALL_IMAGE,
    LINE_MAP_IMAGE,
    LOG_LEVEL,
    get_active_params,
    hough_kwargs,
)


def run(image_path: str, background_path: str, output_dir: str):
    """
    Runs the complete pipeline for one image:
      1. Point extraction (bright pixels, centre origin)
      2. Hough setup
      3. Plot every point (timed)
      4. Print the classifier
      5. Save accumulator, lines and line map
      6. Teardown
    """

    print(f"\n=== Processing image: {image_path} ===")
    params = get_active_params()

    # ------------------------------
    # STEP 1 — POINTS
    # ------------------------------
    points, size = load_points(image_path, params["POINT_INTENSITY_THRESHOLD"])
    if len(points) == 0:
        print(f"[WARN] No points found in {image_path}. Skipping.")
        return []

    # ------------------------------
    # STEP 2..4 — HOUGH
    # ------------------------------
    with HoughTransform(points, size, **hough_kwargs(params)) as hough:
        start = time.process_time()
        hough.plot_points()
        print(f"plot_point() time: {time.process_time() - start:.4f}s")

        hough.print_classifier()
        lines = hough.get_lines()

        # ------------------------------
        # STEP 5 — SAVE OUTPUTS
        # ------------------------------
        small_image = cv2.imread(image_path)
        large_image = cv2.imread(background_path)
        if large_image is None:
            print(f"[WARN] Background {background_path} not found, using the input image.")
            large_image = small_image

        save_all_outputs(
            output_dir=output_dir,
            counts=hough.accumulator.counts,
            lines=lines,
            small_image=small_image,
            large_image=large_image,
            params=params,
            names={
                "accumulator": ACCUMULATOR_IMAGE,
                "output": OUTPUT_IMAGE,
                "output_small": OUTPUT_SMALL_IMAGE,
                "linemap": LINE_MAP_IMAGE,
            },
        )

    print(f"[OK] {len(lines)} lines detected in {image_path}")
    return lines


def main():
    """
    Main entry point:
      - Loads the input image
      - Detects its lines
      - Saves output files
    """
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    if not os.path.exists(INPUT_IMAGE):
        print(f"[ERROR] Input image not found: {INPUT_IMAGE}")
        return

    run(INPUT_IMAGE, BACKGROUND_IMAGE, OUTPUT_FOLDER)
    print("\n=== All clear! ===")


if __name__ == "__main__":
    main()
