import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace
from typing import Optional

from dotenv import load_dotenv

from element_inspector import ElementInspector
from element_inspector.config import InspectorConfig
from element_inspector.types import ElementDescriptor

logger = logging.getLogger("element_inspector")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="element_inspector",
        description="Describe a page element: locator, DOM context and owning component.",
    )
    parser.add_argument("url", help="Page to open")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--selector", help="CSS selector of the element")
    target.add_argument("--point", nargs=2, type=int, metavar=("X", "Y"),
                        help="Viewport coordinates of the element")
    parser.add_argument("--show", action="store_true", help="Run with a visible browser")
    parser.add_argument("--highlight", action="store_true",
                        help="Outline the element after describing it")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Seconds to wait for component info")
    return parser.parse_args(argv)


async def inspect(inspector: ElementInspector, args: argparse.Namespace) -> Optional[ElementDescriptor]:
    if args.selector:
        return await inspector.describe_selector(args.selector)

    element = inspector.element_at_point(*args.point)
    if element is None:
        return None
    return await inspector.describe(element)


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)

    config = InspectorConfig.from_env()
    config = replace(
        config,
        headless=config.headless and not args.show,
        component_timeout=args.timeout if args.timeout is not None else config.component_timeout,
        highlight_on_describe=args.highlight,
    )

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    with ElementInspector(config) as inspector:
        if not inspector.navigate_to(args.url):
            return 1
        descriptor = asyncio.run(inspect(inspector, args))

    if descriptor is None:
        logger.error("No element found")
        return 1

    print(json.dumps(descriptor.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
