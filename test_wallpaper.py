"""Tests for the image-export renderer."""

from datetime import date, datetime, timedelta, timezone

from PIL import Image, ImageColor

from calendar_logic import build_year
from settings import DEFAULT_STYLE
from wallpaper import compute_layout, export_wallpaper, render_wallpaper

REF = datetime(2024, 3, 15, 9, 30, tzinfo=timezone(timedelta(hours=7)))


def _center(box):
    left, top, right, bottom = box
    return (left + right) // 2, (top + bottom) // 2


def test_layout_has_one_dot_per_day():
    months = build_year(REF)
    layout = compute_layout(months, DEFAULT_STYLE)
    assert len(layout.dots) == 366
    assert [text for _x, _y, text in layout.labels][:4] == ["Jan", "Feb", "Mar", "Apr"]


def test_layout_fits_inside_image():
    layout = compute_layout(build_year(REF), DEFAULT_STYLE)
    for left, top, right, bottom in layout.dots.values():
        assert 0 <= left < right < DEFAULT_STYLE["width"]
        assert DEFAULT_STYLE["height"] * DEFAULT_STYLE["top_pad"] <= top < bottom
        assert bottom < DEFAULT_STYLE["height"] * (1 - DEFAULT_STYLE["bottom_pad"])


def test_layout_columns_follow_weekdays():
    layout = compute_layout(build_year(REF), DEFAULT_STYLE)
    # 2024-03-04 and 2024-03-11 are Mondays, 2024-03-10 is a Sunday
    assert layout.dots[(2, 4)][0] == layout.dots[(2, 11)][0]
    assert layout.dots[(2, 10)][0] > layout.dots[(2, 9)][0]
    assert layout.dots[(2, 11)][1] > layout.dots[(2, 10)][1]


def test_render_colours_past_today_future():
    months = build_year(REF)
    img = render_wallpaper(months, DEFAULT_STYLE)
    assert img.size == (DEFAULT_STYLE["width"], DEFAULT_STYLE["height"])

    dots = compute_layout(months, DEFAULT_STYLE).dots
    assert img.getpixel(_center(dots[(2, 15)])) == ImageColor.getrgb(DEFAULT_STYLE["today"])
    assert img.getpixel(_center(dots[(2, 10)])) == ImageColor.getrgb(DEFAULT_STYLE["past"])
    assert img.getpixel(_center(dots[(2, 20)])) == ImageColor.getrgb(DEFAULT_STYLE["future"])
    # Earlier months are not "past": only the current month carries today
    assert img.getpixel(_center(dots[(0, 1)])) == ImageColor.getrgb(DEFAULT_STYLE["future"])
    assert img.getpixel((0, 0)) == ImageColor.getrgb(DEFAULT_STYLE["background"])


def test_custom_style_size():
    style = dict(DEFAULT_STYLE, width=1200, height=900, dot_size=10, dot_gap=3, month_gap=20)
    img = render_wallpaper(build_year(date(2023, 6, 1)), style)
    assert img.size == (1200, 900)


def test_export_writes_png(tmp_path):
    path = tmp_path / "out" / "calendar.png"
    result = export_wallpaper(str(path), REF, DEFAULT_STYLE)
    assert result == str(path)
    with Image.open(path) as img:
        assert img.format == "PNG"
        assert img.size == (DEFAULT_STYLE["width"], DEFAULT_STYLE["height"])


def test_export_other_year_has_no_today(tmp_path):
    path = tmp_path / "calendar-2023.png"
    export_wallpaper(str(path), REF, DEFAULT_STYLE, year=2023)
    months = build_year(REF, 2023)
    dots = compute_layout(months, DEFAULT_STYLE).dots
    with Image.open(path) as img:
        rgb = img.convert("RGB")
        assert rgb.getpixel(_center(dots[(2, 15)])) == ImageColor.getrgb(DEFAULT_STYLE["future"])
