"""
Configuration file for the Hough line detection driver.

Contains the I/O paths, the Hough transform parameters and the
rendering parameters used by main.py. The core (detectors/) never reads
this module; it receives every value as an explicit argument.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

INPUT_IMAGE = "sample_small.bmp"
BACKGROUND_IMAGE = "sample.bmp"
OUTPUT_FOLDER = "output"

ACCUMULATOR_IMAGE = "accumulator.bmp"
OUTPUT_IMAGE = "output.bmp"
OUTPUT_SMALL_IMAGE = "output_small.bmp"
LINE_MAP_IMAGE = "linemap.bmp"


# ---------------------------------------------------------------
# POINT EXTRACTION
# ---------------------------------------------------------------

# Pixels brighter than this (grayscale, 0-255) become input points
POINT_INTENSITY_THRESHOLD = 127


# ===============================================================
# HOUGH PARAMETERS
# ===============================================================

THRESHOLD = 12                     # votes needed to consider a cell
TOLERANCE_T = 15.0                 # degrees, scaled by PRECISION internally
TOLERANCE_R = 5.0                  # pixels, see USE_DISTANCE_TOLERANCE
PRECISION = 1                      # angle subdivisions per degree
MAX_LINES = 10000                  # 0 / None fall back to 500

# Compare the distance axis against TOLERANCE_R instead of TOLERANCE_T.
# Off by default: clustering compares both axes against TOLERANCE_T.
USE_DISTANCE_TOLERANCE = False


# ---------------------------------------------------------------
# RENDERING
# ---------------------------------------------------------------

ACCUMULATOR_SCALE = 1.0 / 20.0     # red intensity per vote
OUTPUT_FACTOR = 10                 # scale for OUTPUT_IMAGE
OUTPUT_SMALL_FACTOR = 1            # scale for OUTPUT_SMALL_IMAGE
MIN_ABS_SLOPE = 0.5                # lines flatter than this are skipped
MIN_ABS_INTERCEPT = 1.0            # lines through the origin are skipped

COLOR_LINE = (0, 0, 255)           # red (BGR)


# ---------------------------------------------------------------
# LOGGING
# ---------------------------------------------------------------

LOG_LEVEL = "INFO"


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters as a single dictionary.
    - Hough keys are named after the HoughTransform arguments so they
      can be splatted straight into it (see hough_kwargs()).
    """

    return {
        "THRESHOLD": THRESHOLD,
        "TOLERANCE_T": TOLERANCE_T,
        "TOLERANCE_R": TOLERANCE_R,
        "PRECISION": PRECISION,
        "MAX_LINES": MAX_LINES,
        "USE_DISTANCE_TOLERANCE": USE_DISTANCE_TOLERANCE,
        "POINT_INTENSITY_THRESHOLD": POINT_INTENSITY_THRESHOLD,
        "ACCUMULATOR_SCALE": ACCUMULATOR_SCALE,
        "OUTPUT_FACTOR": OUTPUT_FACTOR,
        "OUTPUT_SMALL_FACTOR": OUTPUT_SMALL_FACTOR,
        "MIN_ABS_SLOPE": MIN_ABS_SLOPE,
        "MIN_ABS_INTERCEPT": MIN_ABS_INTERCEPT,
        "COLOR_LINE": COLOR_LINE,
    }


def hough_kwargs(params=None):
    """
    Keyword arguments for HoughTransform built from the active params.
    """
    if params is None:
        params = get_active_params()

    return {
        "threshold": params["THRESHOLD"],
        "tolerance_t": params["TOLERANCE_T"],
        "tolerance_r": params["TOLERANCE_R"],
        "precision": params["PRECISION"],
        "max_lines": params["MAX_LINES"],
        "use_distance_tolerance": params["USE_DISTANCE_TOLERANCE"],
    }
