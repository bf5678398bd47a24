"""Render the year of month grids as a dot wallpaper (PIL Image)."""

import logging
import os
from dataclasses import dataclass
from datetime import date

from PIL import Image, ImageDraw, ImageFont

from calendar_logic import DotState, MonthGrid, build_year, classify_dot

logger = logging.getLogger(__name__)

MONTHS_PER_ROW = 4

Box = tuple[int, int, int, int]  # left, top, right, bottom


@dataclass(frozen=True)
class WallpaperLayout:
    """Pixel positions for every month label and day dot."""
    labels: tuple[tuple[int, int, str], ...]
    dots: dict[tuple[int, int], Box]  # (month index, day) -> circle box


def _load_font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    for name in ("DejaVuSans.ttf", "arial.ttf", "segoeui.ttf"):
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default()


def compute_layout(months: tuple[MonthGrid, ...], style: dict) -> WallpaperLayout:
    """Place the months in rows of four, centred in the padded area."""
    dot = style["dot_size"]
    gap = style["dot_gap"]
    month_gap = style["month_gap"]
    header = style["label_size"] + style["label_gap"]

    month_w = 7 * dot + 6 * gap
    rows = [months[i:i + MONTHS_PER_ROW] for i in range(0, len(months), MONTHS_PER_ROW)]
    row_heights = []
    for row in rows:
        n_weeks = max(len(m.weeks) for m in row)
        row_heights.append(header + n_weeks * dot + (n_weeks - 1) * gap)

    block_w = MONTHS_PER_ROW * month_w + (MONTHS_PER_ROW - 1) * month_gap
    block_h = sum(row_heights) + (len(rows) - 1) * month_gap

    area_top = round(style["height"] * style["top_pad"])
    area_bottom = style["height"] - round(style["height"] * style["bottom_pad"])
    x0 = (style["width"] - block_w) // 2
    y0 = area_top + (area_bottom - area_top - block_h) // 2

    labels: list[tuple[int, int, str]] = []
    dots: dict[tuple[int, int], Box] = {}
    y = y0
    for r, row in enumerate(rows):
        for c, grid in enumerate(row):
            month_idx = r * MONTHS_PER_ROW + c
            mx = x0 + c * (month_w + month_gap)
            labels.append((mx, y, grid.month_name))
            for w, week in enumerate(grid.weeks):
                top = y + header + w * (dot + gap)
                for col, day in enumerate(week):
                    if day is None:
                        continue
                    left = mx + col * (dot + gap)
                    dots[(month_idx, day)] = (left, top, left + dot - 1, top + dot - 1)
        y += row_heights[r] + month_gap
    return WallpaperLayout(tuple(labels), dots)


def render_wallpaper(months: tuple[MonthGrid, ...], style: dict) -> Image.Image:
    """Return an RGB image with one dot per day, coloured past/today/future."""
    img = Image.new("RGB", (style["width"], style["height"]), style["background"])
    draw = ImageDraw.Draw(img)
    font = _load_font(style["label_size"])
    layout = compute_layout(months, style)

    colors = {
        DotState.TODAY: style["today"],
        DotState.PAST: style["past"],
        DotState.FUTURE: style["future"],
    }
    for x, y, text in layout.labels:
        draw.text((x, y), text, fill=style["label"], font=font)
    for (month_idx, day), box in layout.dots.items():
        state = classify_dot(day, months[month_idx].today)
        draw.ellipse(box, fill=colors[state])
    return img


def export_wallpaper(path: str, instant: date, style: dict,
                     year: int | None = None) -> str:
    """Build the year around *instant*, render it and save a PNG to *path*."""
    months = build_year(instant, year)
    img = render_wallpaper(months, style)
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    img.save(path, format="PNG")
    logger.info("Wrote %dx%d wallpaper to %s", img.width, img.height, path)
    return path
