from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from lighthtml.core.managers.config_manager import config_manager
from lighthtml.core.utils.configure_logging import configure_logger
from lighthtml.dom import DisplayType, ElementNode, ImageNode, LightEvent, TagClosingType
from lighthtml.services.image_load_service import ImageLoadService

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_SOURCES = ["./images/photo.jpg", "https://via.placeholder.com/150"]

USAGE = """
Usage:
  lighthtml events                    Build a small form and simulate events on it.
  lighthtml images [SRC ...]          Build an image gallery page and try to load every image.
  lighthtml config list               Show the configuration loaded from settings.json.

Options:
  --log-level LEVEL                   Override debug.level (DEBUG, INFO, WARNING, ...).
"""


# --- events ---

def _print_event(label: str):
    def handler(event: LightEvent) -> None:
        target = event.target
        details = f" data={event.data}" if event.data else ""
        print(f"[{label}] <{target.tag_name}> received '{event.event_type}'{details}")
    return handler


def build_event_demo() -> ElementNode:
    """Builds the container/button/input tree used by the events command."""
    button = (
        ElementNode("button", DisplayType.INLINE)
        .add_class("btn")
        .add_class("btn-primary")
        .add_attribute("type", "button")
        .add_text("Click me!")
    )
    button.add_event_listener("click", _print_event("CLICK"))
    button.add_event_listener("mouseover", _print_event("MOUSEOVER"))
    button.add_event_listener("mouseout", _print_event("MOUSEOUT"))

    text_input = (
        ElementNode("input", DisplayType.INLINE, TagClosingType.SELF_CLOSING)
        .add_class("form-control")
        .add_attribute("type", "text")
        .add_attribute("placeholder", "Type something...")
    )
    text_input.add_event_listener("focus", _print_event("FOCUS"))
    text_input.add_event_listener("change", _print_event("CHANGE"))
    text_input.add_event_listener("blur", _print_event("BLUR"))

    container = (
        ElementNode("div")
        .add_class("container")
        .add_attribute("id", "main-container")
        .add_child(ElementNode("h2").add_text("Event listeners"))
        .add_child(button)
        .add_child(ElementNode("br", DisplayType.INLINE, TagClosingType.SELF_CLOSING))
        .add_child(text_input)
    )
    container.add_event_listener("click", _print_event("CONTAINER-CLICK"))
    return container


def _handle_events(_args: argparse.Namespace) -> int:
    container = build_event_demo()
    button = container.children[1]
    text_input = container.children[3]

    print(f"Button listens for: {', '.join(button.get_event_types())}")
    print(f"Input listens for: {', '.join(text_input.get_event_types())}")
    print(f"Container has click listener: {container.has_event_listener('click')}")
    print()
    print(container.to_formatted_html(), end="")
    print()

    second_click = _print_event("CLICK-2")
    button.add_event_listener("click", second_click)
    button.dispatch_event("click", {"x": 100, "y": 200})
    button.dispatch_event("mouseover")
    button.dispatch_event("mouseout")
    text_input.dispatch_event("focus")
    text_input.dispatch_event("change", {"value": "new text", "old_value": ""})
    text_input.dispatch_event("blur")
    container.dispatch_event("click")

    button.remove_event_listener("click", second_click)
    print(f"Click listeners after removal: {button.get_event_listener_count('click')}")
    button.dispatch_event("click")
    return 0


# --- images ---

def build_gallery_page(sources: List[str]) -> ElementNode:
    """Builds an html page whose gallery div holds one ImageNode per source."""
    gallery = ElementNode("div").add_class("image-gallery")
    for index, source in enumerate(sources, start=1):
        gallery.add_child(ImageNode(source, f"Image {index}").add_class("gallery-image"))

    return (
        ElementNode("html")
        .add_child(ElementNode("head").add_child(ElementNode("title").add_text("LightHTML gallery")))
        .add_child(
            ElementNode("body")
            .add_child(ElementNode("h1").add_text("Image gallery"))
            .add_child(gallery)
            .add_child(ElementNode("hr", DisplayType.BLOCK, TagClosingType.SELF_CLOSING))
        )
    )


def _handle_images(args: argparse.Namespace) -> int:
    page = build_gallery_page(args.sources or DEFAULT_IMAGE_SOURCES)
    service = ImageLoadService(show_progress=not args.no_progress)
    asyncio.run(service.load_tree(page))

    for image in page.find_images():
        status = "loaded" if image.is_loaded else "not loaded"
        print(f"- {image.get_image_info()} ({status})")
        print(f"  {image.to_html()}")
    print()
    print(page.to_formatted_html(), end="")
    return 0


# --- config ---

def _handle_config(_args: argparse.Namespace) -> int:
    print(json.dumps(config_manager.get_all(), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lighthtml", description="LightHTML node tree demos.", add_help=False)
    parser.add_argument("--log-level")
    subparsers = parser.add_subparsers(dest="command")

    events_parser = subparsers.add_parser("events", add_help=False)
    events_parser.set_defaults(func=_handle_events)

    images_parser = subparsers.add_parser("images", add_help=False)
    images_parser.add_argument("sources", nargs="*")
    images_parser.add_argument("--no-progress", action="store_true")
    images_parser.set_defaults(func=_handle_images)

    config_parser = subparsers.add_parser("config", add_help=False)
    config_parser.add_argument("action", choices=["list"])
    config_parser.set_defaults(func=_handle_config)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entrypoint for the lighthtml console script."""
    args_list = sys.argv[1:] if argv is None else argv
    if not args_list or args_list[0] in ["help", "-h", "--help"]:
        print(USAGE)
        return 0

    try:
        args = build_parser().parse_args(args_list)
    except SystemExit:
        # Argparse exits on bad input; show our own usage instead.
        print(USAGE)
        return 1

    configure_logger(args.log_level or config_manager.get_nested("debug.level", "WARNING"))

    if not hasattr(args, "func"):
        print(USAGE)
        return 1

    try:
        return args.func(args)
    except Exception as e:
        logger.error("Command '%s' failed: %s", args.command, e, exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
