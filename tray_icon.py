"""System-tray icon setup via pystray."""

from datetime import date
from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu


def create_tray(
    icon_image: Image.Image,
    today: date,
    on_show: Callable[[], None],
    on_export: Callable[[], None],
    on_exit: Callable[[], None],
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    menu = Menu(
        MenuItem("Show Calendar", lambda _icon, _item: on_show(), default=True),
        MenuItem("Export Wallpaper", lambda _icon, _item: on_export()),
        Menu.SEPARATOR,
        MenuItem("Exit", lambda _icon, _item: on_exit()),
    )
    title = f"Dot Calendar – {today.strftime('%d %b %Y')}"
    return pystray.Icon("dot-calendar", icon_image, title, menu)
