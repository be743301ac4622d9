"""Space image format: a layer checksum and the decoded picture."""

from __future__ import annotations

import argparse
from pathlib import Path

WIDTH = 25
HEIGHT = 6

BLACK = "1"
WHITE = "0"
TRANSPARENT = "2"


def layers(data: str, width: int = WIDTH, height: int = HEIGHT) -> list[str]:
    """Split the pixel data into whole layers; a trailing partial layer is dropped."""
    if width < 1 or height < 1:
        raise ValueError("image dimensions must be positive")
    size = width * height
    return [data[start : start + size] for start in range(0, len(data) - size + 1, size)]


def checksum(data: str, width: int = WIDTH, height: int = HEIGHT) -> int:
    """Ones times twos in the first layer having the fewest zeros."""
    all_layers = layers(data, width, height)
    if not all_layers:
        raise ValueError("image holds no complete layer")
    fewest = min(all_layers, key=lambda layer: layer.count("0"))
    return fewest.count("1") * fewest.count("2")


def decode(data: str, width: int = WIDTH, height: int = HEIGHT) -> str:
    """Stack the layers, each pixel taking the first non-transparent value."""
    image = [TRANSPARENT] * (width * height)
    for layer in layers(data, width, height):
        image = [new if old == TRANSPARENT else old for old, new in zip(image, layer)]
    return "".join(image)


def render(image: str, width: int = WIDTH) -> str:
    """Draw a decoded image, 'X' for the pixels coded 1 and a space for the rest."""
    if width < 1:
        raise ValueError("image width must be positive")
    return "\n".join(
        "".join("X" if pixel == BLACK else " " for pixel in image[start : start + width])
        for start in range(0, len(image), width)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Decode a space image.")
    parser.add_argument("input", nargs="?", default="input", type=Path)
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    args = parser.parse_args(argv)
    data = args.input.read_text()
    print(checksum(data, args.width, args.height))
    print(render(decode(data, args.width, args.height), args.width))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())