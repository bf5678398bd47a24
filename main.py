"""Entry point: headless wallpaper export, or pystray (daemon thread) with tkinter (main thread)."""

import argparse
import logging
import sys
import threading

import clock
from calendar_logic import InvalidArgument
from settings import load_settings
from wallpaper import export_wallpaper

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Year-of-dots calendar wallpaper")
    parser.add_argument("--export", metavar="PATH", nargs="?", const="",
                        help="render the wallpaper to PATH (default: settings export_path) and exit")
    parser.add_argument("--year", type=int, default=None,
                        help="year to render (default: the current year)")
    parser.add_argument("--timezone", default=None,
                        help="IANA timezone for 'today' (default: settings timezone)")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def run_export(path: str, tz_name: str, style: dict, year: int | None) -> int:
    try:
        instant = clock.now(tz_name)
        export_wallpaper(path, instant, style, year)
    except (clock.ClockUnavailable, InvalidArgument) as exc:
        logger.error("Export failed: %s", exc)
        return 1
    except OSError as exc:
        logger.error("Cannot write wallpaper to %s: %s", path, exc)
        return 1
    return 0


def run_tray(settings: dict) -> int:
    # tkinter and pystray need a display; import them only for the GUI
    from calendar_window import CalendarWindow
    from icon_gen import create_icon_image
    from tray_icon import create_tray

    try:
        import ctypes
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError):
        pass

    tray = None

    def on_refresh(instant) -> None:
        if tray is not None:
            tray.icon = create_icon_image(instant)
            tray.title = f"Dot Calendar – {instant.strftime('%d %b %Y')}"

    cal_win = CalendarWindow(settings["timezone"], on_refresh=on_refresh)

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_export() -> None:
        def _export() -> None:
            run_export(settings["export_path"], cal_win.tz_name, settings["style"], None)
        cal_win.root.after(0, _export)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    tray = create_tray(create_icon_image(cal_win.instant), cal_win.instant,
                       on_show, on_export, on_exit)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    cal_win.root.mainloop()
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings()
    if args.timezone:
        settings["timezone"] = args.timezone

    if args.export is not None:
        path = args.export or settings["export_path"]
        return run_export(path, settings["timezone"], settings["style"], args.year)

    try:
        return run_tray(settings)
    except clock.ClockUnavailable as exc:
        logger.error("Cannot start: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
