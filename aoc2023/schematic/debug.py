"""
Schematic Debug Utilities

Renders an annotated image of a schematic showing which numbers were
accepted as part numbers and which symbols qualified as gears.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from ..text import split_lines
from .grid import build_index
from .tokenizer import DIGITS, is_gear_symbol, is_part_symbol
from .validator import find_gears, find_part_numbers

logger = logging.getLogger(__name__)


# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10

# Layout
CELL_WIDTH = 10
CELL_HEIGHT = 14
MARGIN = 10
HEADER_HEIGHT = 20

# Colors
BACKGROUND = "#101010"
FILLER_COLOR = "#505050"
SYMBOL_COLOR = "#FFFFFF"
PART_COLOR = "#4CAF50"      # Green
ORPHAN_COLOR = "#d32f2f"    # Red
GEAR_COLOR = "#FFC107"      # Yellow


def save_debug_image(text: str, path: Optional[Path] = None, strict: bool = False) -> Path:
    """
    Save an annotated image of a schematic.

    Annotations include:
    - Part numbers in green, numbers touching no symbol in red
    - Qualifying gear symbols boxed in yellow
    - Summary line with counts

    Args:
        text: Full schematic input
        path: Output file path (default: timestamped file in DEBUG_DIR)
        strict: Use the exactly-two gear rule

    Returns:
        Path of the written image

    Raises:
        MalformedLine: If the schematic cannot be tokenized
    """
    lines = split_lines(text)
    part_index = build_index(text, is_part_symbol)
    gear_index = build_index(text, is_gear_symbol)

    parts = {(n.row, n.start) for n in find_part_numbers(part_index)}
    gears = find_gears(gear_index, strict=strict)

    if path is None:
        DEBUG_DIR.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:-3]
        path = DEBUG_DIR / f"debug_{timestamp}.png"
    else:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

    cols = max((len(line) for line in lines), default=0)
    width = MARGIN * 2 + max(cols * CELL_WIDTH, 200)
    height = MARGIN * 2 + HEADER_HEIGHT + len(lines) * CELL_HEIGHT

    image = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    def cell_origin(row: int, col: int):
        return MARGIN + col * CELL_WIDTH, MARGIN + HEADER_HEIGHT + row * CELL_HEIGHT

    # Characters outside numbers
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char in DIGITS:
                continue
            color = SYMBOL_COLOR if is_part_symbol(char) else FILLER_COLOR
            draw.text(cell_origin(row, col), char, fill=color, font=font)

    # Numbers, colored by whether they are parts
    for number in part_index.iter_numbers():
        color = PART_COLOR if (number.row, number.start) in parts else ORPHAN_COLOR
        draw.text(cell_origin(number.row, number.start), str(number.value), fill=color, font=font)

    # Gear boxes
    for gear in gears:
        x, y = cell_origin(gear.row, gear.column)
        draw.rectangle([x - 1, y - 1, x + CELL_WIDTH - 1, y + CELL_HEIGHT - 1], outline=GEAR_COLOR)

    summary = (
        f"Rows: {part_index.row_count}, Numbers: {part_index.number_count}, "
        f"Parts: {len(parts)}, Gears: {len(gears)}"
    )
    draw.text((MARGIN, MARGIN), summary, fill=SYMBOL_COLOR, font=font)

    image.save(path, "PNG")
    logger.info(f"Debug image saved: {path}")

    _cleanup_debug_images()
    return path


def _cleanup_debug_images() -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not DEBUG_DIR.exists():
        return

    debug_files = sorted(
        DEBUG_DIR.glob("debug_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        try:
            old_file.unlink()
        except OSError as e:
            logger.warning(f"Could not remove old debug image {old_file}: {e}")
