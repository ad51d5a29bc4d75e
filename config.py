"""
Default settings for the renderer. Every value here can be overridden per
call and from the command line.
"""
import numpy as np

# --- Canvas ---
CANVAS_WIDTH = 1024
CANVAS_HEIGHT = 1024

# --- Camera and viewport ---
# The camera sits at the origin looking down +z; the viewport is a
# VIEWPORT_WIDTH x VIEWPORT_HEIGHT plane at VIEWPORT_DISTANCE.
CAMERA_ORIGIN = (0.0, 0.0, 0.0)
VIEWPORT_WIDTH = 1
VIEWPORT_HEIGHT = 1
VIEWPORT_DISTANCE = 1.0

# Valid range of t along a primary ray; t_min = 1 starts rays at the viewport
T_MIN = 1.0
T_MAX = np.inf

# --- Output ---
BACKGROUND_COLOR = (255, 255, 255)
OUTPUT_PATH = "output.png"

# Number of processes used for rendering; 1 renders in the calling process
WORKERS = 1
