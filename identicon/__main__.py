"""Command line entry point: ``python -m identicon INPUT``."""

import argparse
import logging
from typing import List, Optional

from identicon.pipeline import build
from identicon.renderer.png import draw_image
from identicon.sink import save_image
from identicon.state import ImageState
from identicon.utils.grid import cell_mask


def render_preview(state: ImageState) -> str:
    """Render the kept cells as text, two characters per cell."""
    return "\n".join(
        "".join("██" if filled else "  " for filled in row)
        for row in cell_mask(state.grid)
    )


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="identicon", description="Generate an identicon PNG from a string"
    )
    parser.add_argument("input", help="String to derive the identicon from")
    parser.add_argument(
        "--output-dir", default=".", help="Directory for <input>.png (default: .)"
    )
    parser.add_argument(
        "--preview", action="store_true", help="Print the cell pattern as text"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    state = build(args.input)
    save_image(draw_image(state), args.input, args.output_dir)

    if args.preview:
        print(render_preview(state))


if __name__ == "__main__":
    main()
