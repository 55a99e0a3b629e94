"""Default configuration values for cl-gallery.

This module centralizes the hard-coded defaults and path conventions used
throughout the gallery, making them easy to discover and modify.
"""

# Path conventions (relative to the site root)
DEFAULT_DATA_DIR = "data"
DEFAULT_LEGEND_FILE = "legend.png"

# Candidate formats, tried left to right
IMAGE_FORMATS = ("png", "jpg", "jpeg", "svg")

# Output
DEFAULT_OUTPUT_DIR = "site"
DEFAULT_PAGE_TITLE = "CL Gallery"
INDEX_FILENAME = "index.html"

# Messages
DEFAULT_ERROR_MESSAGE = "Failed to load application data"
NO_IMAGE_TEXT = "No Image"

# Generated placeholder image
PLACEHOLDER_WIDTH = 400
PLACEHOLDER_HEIGHT = 300

# Accepted configuration file suffixes
CONFIG_SUFFIXES = (".yaml", ".yml", ".json", ".js")
