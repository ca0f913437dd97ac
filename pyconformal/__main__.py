import argparse
import sys

from .config import FPS, GRID_LENGTH, TITLE, WINDOW_SIZE, ViewerConfig
from .errors import ConformalError
from .mapping import EXECUTORS, MAPPINGS


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pyconformal",
        description="Show how the complex plane distorts under a mapping",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-m",
        "--mapping",
        choices=sorted(MAPPINGS),
        default="inversion",
        help="the complex mapping to apply to the grid",
    )
    parser.add_argument(
        "-n",
        "--grid-length",
        type=int,
        default=GRID_LENGTH,
        help="the number of samples along each axis of the grid",
    )
    parser.add_argument(
        "--window-size",
        type=int,
        default=WINDOW_SIZE,
        help="The side of the square window, in pixels",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=1.0,
        help="the initial half width of the visible square",
    )
    parser.add_argument(
        "-j",
        "--workers",
        type=int,
        default=None,
        help="worker count for the mapping pool (default: one per cpu)",
    )
    parser.add_argument(
        "--executor",
        choices=sorted(EXECUTORS),
        default="process",
        help="the kind of worker pool used to map points",
    )
    parser.add_argument(
        "--no-remap-on-zoom",
        dest="remap_on_zoom",
        action="store_false",
        help="reuse the mapped points when zooming instead of recomputing them",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=FPS,
        help="frames per second of the interactive loop",
    )
    parser.add_argument(
        "-o",
        "--out-file",
        default=None,
        help="render a single frame to this image file instead of opening a window",
    )
    return parser


def config_from_args(args) -> ViewerConfig:
    return ViewerConfig(
        grid_length=args.grid_length,
        window_size=args.window_size,
        scale=args.scale,
        mapping=args.mapping,
        workers=args.workers,
        executor=args.executor,
        remap_on_zoom=args.remap_on_zoom,
        title=TITLE,
        fps=args.fps,
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    print(f"Conformal mapping: {config.mapping}")
    print(f"grid_length: {config.grid_length}")
    print(f"window_size: {config.window_size}")
    print(f"scale: {config.scale}")

    # imports pygame
    from .viewer import ConformalViewer, render_to_image

    try:
        if args.out_file:
            print(f"img_name: {args.out_file}")
            render_to_image(config, args.out_file)
        else:
            ConformalViewer(config).run()
    except ConformalError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
