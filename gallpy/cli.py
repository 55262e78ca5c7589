"""
Command-line entry point.

Usage:
    gallpy [-d] [-u URL] [DIR ...]

Builds a gallery for each DIR (default: the current directory). The
gallery at DIR is published at URL/DIR.
"""

import argparse
import cProfile
import pstats
import sys

from . import __version__
from .config import DEFAULT_BASE_URL, DEFAULT_RESIZER, ROWSIZE, BuildSettings
from .errors import GallpyError
from .log import setup_logger
from .pipeline import build_gallery
from .resize import RESIZERS
from .urls import cleanpath


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gallpy",
        description="Build static HTML photo galleries from directory trees.",
    )
    parser.add_argument("dirs", nargs="*", default=["."], metavar="DIR",
                        help="directories to build (default: current directory)")
    parser.add_argument("-u", "--url", default=DEFAULT_BASE_URL,
                        help=f"URL the current directory is served at (default: {DEFAULT_BASE_URL})")
    parser.add_argument("-d", "--debug", action="store_true", help="log debugging detail")
    profiling = parser.add_mutually_exclusive_group()
    profiling.add_argument("-p", "--profile", action="store_true",
                           help="profile each build and print stats to stderr")
    profiling.add_argument("-s", "--profile-stats", metavar="FILE",
                           help="profile each build and dump raw stats to FILE")
    parser.add_argument("--resizer", choices=sorted(RESIZERS), default=DEFAULT_RESIZER,
                        help=f"image resizing backend (default: {DEFAULT_RESIZER})")
    parser.add_argument("--rowsize", type=int, default=ROWSIZE,
                        help=f"thumbnails per row (default: {ROWSIZE})")
    parser.add_argument("-j", "--jobs", type=int, default=1,
                        help="parallel resize workers (default: 1)")
    parser.add_argument("--fail-fast", action="store_true",
                        help="stop at the first failed resize")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def profiled(args, func):
    """Run func under cProfile when asked to; return its result."""
    if not (args.profile or args.profile_stats):
        return func()
    profiler = cProfile.Profile()
    try:
        return profiler.runcall(func)
    finally:
        if args.profile_stats:
            profiler.dump_stats(args.profile_stats)
        else:
            pstats.Stats(profiler, stream=sys.stderr).sort_stats("cumulative").print_stats(30)


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = setup_logger(args.debug)
    if args.profile:
        logger.info("Using cProfile.")

    status = 0
    for scan_dir in args.dirs:
        settings = BuildSettings(
            base_url=cleanpath(f"{args.url.rstrip('/')}/{scan_dir}"),
            rowsize=args.rowsize,
            resizer=args.resizer,
            jobs=args.jobs,
            keep_going=not args.fail_fast,
        )
        logger.info("Base URL: %s", settings.base_url)
        try:
            report = profiled(args, lambda: build_gallery(scan_dir, settings, logger))
        except GallpyError as exc:
            logger.error("Build of %s failed: %s", scan_dir, exc)
            status = 1
            continue
        logger.info("Done: %s", report.summary())
        if not report.ok:
            for path, _ in report.failed:
                logger.error("Not built: %s", path)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
