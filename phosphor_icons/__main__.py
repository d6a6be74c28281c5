#!/usr/bin/env python3
"""Command line entry point for resolving and rendering icons."""

import argparse
import logging
import os
import sys

from dotenv import find_dotenv

from phosphor_icons.core.exceptions import PhosphorIconsError
from phosphor_icons.core.models import Icon, IconStyle
from phosphor_icons.icons.service import IconService
from phosphor_icons.utils.config import load_settings


def parse_icon(value: str) -> Icon:
    """Parse an icon name given as 'arrow_left' or 'arrow-left'."""
    try:
        return Icon(value.replace("-", "_").lower())
    except ValueError:
        raise argparse.ArgumentTypeError(f"unknown icon: {value}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phosphor_icons", description="Resolve Phosphor icons from bundled SVG documents"
    )
    parser.add_argument("--env-file", help="Path to a .env file (default: .env found from the current directory)")
    parser.add_argument("--settings", "-c", help="Settings file path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    styles = [style.value for style in IconStyle]
    subparsers = parser.add_subparsers(dest="command", required=True)

    key_parser = subparsers.add_parser("key", help="Print the resource key of an icon")
    key_parser.add_argument("icon", type=parse_icon)
    key_parser.add_argument("--style", "-s", choices=styles)

    path_parser = subparsers.add_parser("path", help="Print the path data of an icon")
    path_parser.add_argument("icon", type=parse_icon)
    path_parser.add_argument("--style", "-s", choices=styles)

    render_parser = subparsers.add_parser("render", help="Render an icon to a PNG file")
    render_parser.add_argument("icon", type=parse_icon)
    render_parser.add_argument("output", help="Output PNG path")
    render_parser.add_argument("--style", "-s", choices=styles)
    render_parser.add_argument("--color", help="Fill color, e.g. '#ff0000'")
    render_parser.add_argument("--size", type=int, help="Icon size in pixels")

    return parser


def render(service: IconService, args) -> int:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtGui import QGuiApplication

    app = QGuiApplication.instance() or QGuiApplication(sys.argv[:1])
    pixmap = service.create_icon_pixmap(args.icon, args.style, args.color, args.size)
    if not pixmap.save(args.output, "PNG"):
        print(f"Error: could not write {args.output}")
        return 1
    logging.info(f"Rendered {args.icon.value} to {args.output}")
    return 0


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.env_file or find_dotenv(usecwd=True), args.settings)
        level = logging.DEBUG if args.verbose else settings.log_level.upper()
        logging.basicConfig(level=level)

        service = IconService.from_settings(settings)
        if args.command == "key":
            print(service.get_resource_key(args.icon, args.style))
        elif args.command == "path":
            print(service.get_path_data(args.icon, args.style))
        elif args.command == "render":
            return render(service, args)
        return 0
    except PhosphorIconsError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
