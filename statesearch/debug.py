"""
Search Debug Utilities

Functions for rendering a solution path to an image and managing debug output.
"""

from pathlib import Path
from typing import Dict, List, Optional

from PIL import Image, ImageDraw, ImageFont

from .search.node import Node


# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10

# Layout in pixels
CELL_SIZE = 24
LABEL_WIDTH = 40
MARGIN = 10

# Fill colors per state character
DISC_COLORS: Dict[str, str] = {
    "P": "#d32f2f",  # Red side up
    "K": "#1976D2",  # Blue side up
}
UNKNOWN_COLOR = "#9E9E9E"


def render_solution_image(
    path: List[Node],
    colors: Optional[Dict[str, str]] = None
) -> Image.Image:
    """
    Render a solution path as an image.

    Each step becomes one row: the step number, then one square per
    character of the state's string form, filled by character.

    Args:
        path: Nodes from the start node to the goal
        colors: Character to fill color mapping (default DISC_COLORS)

    Returns:
        RGB image (a blank margin-only image for an empty path)
    """
    colors = colors if colors is not None else DISC_COLORS
    rows = [str(node.state) for node in path]
    width = max((len(r) for r in rows), default=0)

    img = Image.new(
        "RGB",
        (MARGIN * 2 + LABEL_WIDTH + width * CELL_SIZE,
         MARGIN * 2 + len(rows) * CELL_SIZE),
        "white"
    )
    draw = ImageDraw.Draw(img)

    try:
        font = ImageFont.truetype("arial.ttf", 12)
    except OSError:
        font = ImageFont.load_default()

    for step, row in enumerate(rows):
        y = MARGIN + step * CELL_SIZE
        draw.text((MARGIN, y + 5), str(step), fill="black", font=font)

        for col, char in enumerate(row):
            x = MARGIN + LABEL_WIDTH + col * CELL_SIZE
            draw.ellipse(
                [x + 2, y + 2, x + CELL_SIZE - 2, y + CELL_SIZE - 2],
                fill=colors.get(char, UNKNOWN_COLOR),
                outline="black"
            )

    return img


def save_debug_image(path: List[Node], filename: str) -> Path:
    """
    Save a rendered solution path under DEBUG_DIR.

    Args:
        path: Nodes from the start node to the goal
        filename: Output file name (placed in DEBUG_DIR)

    Returns:
        Path of the written PNG
    """
    # Ensure debug directory exists
    DEBUG_DIR.mkdir(parents=True, exist_ok=True)

    out_path = DEBUG_DIR / filename
    render_solution_image(path).save(out_path, "PNG")

    # Cleanup old debug images
    _cleanup_debug_images()
    return out_path


def _cleanup_debug_images() -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not DEBUG_DIR.exists():
        return

    # Get all debug images sorted by modification time
    debug_files = sorted(
        DEBUG_DIR.glob("debug_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        old_file.unlink(missing_ok=True)
