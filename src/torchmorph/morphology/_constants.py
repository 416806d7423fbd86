"""Constants for the morphology module."""

# Admissible structuring-element sizes (odd, inclusive)
MIN_SIZE: int = 1
MAX_SIZE: int = 31

# Pixel values of a binary image
BACKGROUND: int = 0
FOREGROUND: int = 255

SHAPES: tuple[str, ...] = ("square", "cross", "disk", "shift")

# Unit (row, column) steps of the shift element
SHIFT_DIRECTIONS: dict[str, tuple[int, int]] = {
    "south_east": (1, 1),
    "south_west": (1, -1),
    "north_east": (-1, 1),
    "north_west": (-1, -1),
}

PADDING_MODES: tuple[str, ...] = ("replicate", "reflect", "circular")
