"""Command line entry point: render a scene file to a PPM image."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from minirt.errors import ERR_ARG, SceneError
from minirt.parser import load_scene
from minirt.renderer import render


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def _size(text: str) -> tuple[int, int]:
    try:
        width_text, height_text = text.lower().split("x")
        width, height = int(width_text), int(height_text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid size: {text}") from exc
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"invalid size: {text}")
    return width, height


def _build_parser() -> _Parser:
    parser = _Parser(prog="minirt", description="Render a .rt scene to a PPM image.")
    parser.add_argument("scene", help="scene description ending in .rt")
    parser.add_argument("-o", "--output", help="image path (default: scene name with .ppm)")
    parser.add_argument("--size", type=_size, help="image size as WIDTHxHEIGHT")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Render the scene named on the command line; return the exit status."""
    args_list = list(sys.argv[1:] if argv is None else argv)
    try:
        args = _build_parser().parse_args(args_list)
    except _UsageError:
        sys.stderr.write(ERR_ARG)
        return 1
    try:
        scene = load_scene(args.scene)
    except SceneError as exc:
        sys.stderr.write(exc.message)
        return 1
    if args.size is not None:
        scene.camera.win_size = (float(args.size[0]), float(args.size[1]))
    output = Path(args.output) if args.output else Path(args.scene).with_suffix(".ppm")
    start = time.perf_counter()
    image = render(scene)
    elapsed_ms = (time.perf_counter() - start) * 1000
    try:
        image.save_ppm(output)
    except OSError as exc:
        sys.stderr.write(f"Error\nCan't write {output}: {exc.strerror}\n")
        return 1
    print(f"Render: {elapsed_ms:f}ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())