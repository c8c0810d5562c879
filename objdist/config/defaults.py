"""
OBJDIST Default Configuration
=============================

Fixed constants for a run. These match the locations and layout the
distance batch has always used, so a run with no configuration at all
reads /tmp/objects/ and writes /tmp/distances.data.

Usage:
    from objdist.config.defaults import (
        INPUT_DIR,
        OUTPUT_PATH,
        POINT_OFFSET,
    )

Modification:
    Prefer a manifest (see objdist.config.loader) over editing values here.
"""

# =============================================================================
# PATHS
# =============================================================================
# Used in: objdist/pipeline.py

INPUT_DIR = "/tmp/objects/"
OUTPUT_PATH = "/tmp/distances.data"


# =============================================================================
# POINT FILE LAYOUT
# =============================================================================
# Used in: objdist/engines/centroid.py
# Each line: <meta> <meta> <x> <y> <z> [...]

POINT_OFFSET = 2         # index of the x field; y and z follow
FIELD_SEPARATOR = " "    # single space, not any whitespace
FILE_TRIM_CHARS = " \n\r"
LINE_SEPARATOR = "\n"


# =============================================================================
# FILENAME LAYOUT
# =============================================================================
# Used in: objdist/intake/names.py
# e.g. label_1_object_2.txt -> ['label', '1', 'object', '2', 'txt']

NAME_DELIMITERS = "_. "
LABEL_TOKEN = 1
OBJECT_TOKEN = 3
