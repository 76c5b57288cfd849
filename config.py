"""
Configuration for the favicons generator.

Contains output layout defaults, colors and other app-wide constants.
"""

import os
from typing import Tuple

# Output directory used when the CLI gets no [output-folder] argument
DEFAULT_OUTPUT_DIR = os.getenv("FAVICONS_OUTPUT_DIR", "static")

# Every raster except favicon.ico lands in this subdirectory
ICONS_SUBDIR = "icons"

# URL prefix the metadata files use to reference the icons
ICON_URL_PATH = f"/{ICONS_SUBDIR}"

# Fully transparent white: pads letterboxed icons and fills theme/tile colors
DEFAULT_BACKGROUND = "#ffffff00"

# PWA display mode written to site.webmanifest
MANIFEST_DISPLAY = "standalone"

# Metadata file names (relative to the output directory)
FAVICON_ICO_FILENAME = "favicon.ico"
WEBMANIFEST_FILENAME = "site.webmanifest"
BROWSERCONFIG_FILENAME = "browserconfig.xml"
HTML_INSTRUCTIONS_FILENAME = "head-instructions.html"


def hex_to_rgba(value: str) -> Tuple[int, int, int, int]:
    """
    Convert a CSS hex color to an RGBA tuple

    Accepts #rgb, #rgba, #rrggbb and #rrggbbaa (leading '#' optional).
    Colors without an alpha channel are fully opaque.

    Raises:
        ValueError: if the string is not a hex color
    """
    digits = value.strip().lstrip('#')

    if len(digits) in (3, 4):
        digits = ''.join(ch * 2 for ch in digits)

    if len(digits) == 6:
        digits += 'ff'

    if len(digits) != 8:
        raise ValueError(f"Invalid hex color: {value!r}")

    try:
        r, g, b, a = (int(digits[i:i + 2], 16) for i in range(0, 8, 2))
    except ValueError:
        raise ValueError(f"Invalid hex color: {value!r}") from None

    return (r, g, b, a)


DEFAULT_FILL_COLOR = hex_to_rgba(DEFAULT_BACKGROUND)
