import logging
import sys

import matplotlib.pyplot as plt
import numpy as np
from consts import HEATMAP_PATH, HEIGHT, WIDTH

logger = logging.getLogger(__name__)

# How many frames each pixel has been changed by a light
pixel_map : np.ndarray = np.zeros((HEIGHT, WIDTH), dtype=np.int64)


def logging_init(level=logging.INFO): #initialize logging and the heatmap
    logging.basicConfig(
        stream=sys.stdout,
        level=level,
        format="%(asctime)s %(levelname)s %(filename)s:%(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",  # ISO-8601
    )
    reset_metrics()


def reset_metrics(width=WIDTH, height=HEIGHT):
    global pixel_map
    pixel_map = np.zeros((height, width), dtype=np.int64)


def log_metrics(frame_count, total_time, metrics):
    if metrics is None:
        return
    logger.info(
        "frame %d (%.2fs): %d lights, %d pixels changed, mean brightness %.1f",
        frame_count, total_time, metrics["lights"], metrics["changed_pixels"], metrics["mean_brightness"],
    )


def logging_close(heatmap_path=HEATMAP_PATH): # save the heatmap and print a summary
    pixels_lit = int(np.count_nonzero(pixel_map))
    total_pixels = pixel_map.size
    pixels_unlit = total_pixels - pixels_lit

    plt.imshow(np.minimum(pixel_map, 100), cmap='hot', interpolation='nearest') # Cap at 100
    plt.savefig(heatmap_path)
    plt.close()

    print(f"pixels_unlit = {pixels_unlit}")
    print(f"pixels_lit = {pixels_lit}")
    print(f"total_pixels = {total_pixels}")
    print(f"Percentage lit = {round((pixels_lit / total_pixels)*100, 2)}%")


def compute_metrics(before: np.ndarray, after: np.ndarray, lights):
    """Compares a frame before and after lighting and adds the changed pixels to the heatmap."""
    global pixel_map
    changed = np.any(before[:, :, :3] != after[:, :, :3], axis=2)

    if pixel_map.shape != changed.shape:
        reset_metrics(changed.shape[1], changed.shape[0])
    pixel_map += changed

    return {
        "lights": len(lights),
        "changed_pixels": int(np.count_nonzero(changed)),
        "mean_brightness": float(after[:, :, :3].mean()),
    }
