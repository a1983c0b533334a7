#!/usr/bin/env python3
"""
OBJ Triangulation Main Program

Usage:
    obj-triangulate lego.obj                       -> lego.triangulated.obj
    obj-triangulate lego.obj lego_convert.obj      (same directory)
    obj-triangulate lego.obj out/lego_converted.obj
    obj-triangulate lego.obj converted/            -> converted/lego.obj
"""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

from .config import (
    TriangulateConfig, ON_FAILURE_SKIP, ON_FAILURE_ABORT,
    ENGINE_EARCLIP, ENGINE_EARCUT,
)
from .obj_io import ObjTriangulator
from .report import report

FILE_EXT = "obj"


def ext(path: Path) -> str:
    """Lower-case file extension without the dot."""
    return path.suffix.lower()[1:]


def resolve_paths(source_arg: str, target_arg: Optional[str] = None,
                  label: str = "triangulated") -> Tuple[Path, Path]:
    """
    Work out the source and target files from the command line arguments.

    Args:
        source_arg: Source OBJ file
        target_arg: Target file or directory (optional)
        label: Infix of the default target name

    Returns:
        (source, target) paths

    Raises:
        ValueError: with a user-facing message if an argument is unusable
    """
    source = Path(source_arg)

    if not source.exists():
        raise ValueError(f"Could not open the source file {source}")

    if ext(source) != FILE_EXT:
        raise ValueError(f"Source file is not an {FILE_EXT} file {source}")

    default_target = source.with_name(f"{source.stem}.{label}.{FILE_EXT}")

    if target_arg is None:
        return source, default_target

    path = Path(target_arg)

    if path.is_dir():
        if path.resolve() == source.parent.resolve():
            return source, default_target
        return source, path / source.name

    if not ext(path):
        raise ValueError(f"Target directory is unknown {path}")

    if ext(path) != FILE_EXT:
        raise ValueError(f"Target file is not an {FILE_EXT} file {path}")

    if not path.parent.is_dir():
        raise ValueError(f"Target file has unknown directory {path}")

    if path.resolve() == source.resolve():
        raise ValueError(f"Target file is the source file {path}")

    return source, path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="obj-triangulate",
        description="Triangulate the polygon faces of a Wavefront OBJ file")
    parser.add_argument("source", help="source .obj file")
    parser.add_argument("target", nargs="?", default=None,
                        help="target .obj file or directory "
                             "(default: <source>.triangulated.obj)")
    parser.add_argument("--on-failure", choices=[ON_FAILURE_SKIP, ON_FAILURE_ABORT],
                        default=ON_FAILURE_SKIP,
                        help="drop faces that can not be triangulated, or stop")
    parser.add_argument("--engine", choices=[ENGINE_EARCLIP, ENGINE_EARCUT],
                        default=ENGINE_EARCLIP,
                        help="triangulation engine")
    parser.add_argument("--preserve-winding", action="store_true",
                        help="flip created triangles to the source face winding")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main program entry point."""
    time_start = time.time()

    args = build_parser().parse_args(argv)

    config = TriangulateConfig(on_failure=args.on_failure,
                               engine=args.engine,
                               preserve_winding=args.preserve_winding)

    try:
        source, target = resolve_paths(args.source, args.target, config.label)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    obj = ObjTriangulator(config)
    triangulated = obj.convert(source, target)

    if triangulated:
        print(f"{source} has been triangulated")
    elif obj.is_empty:
        print(f"{source} can not be triangulated (no polygons)")
    else:
        print(f"{source} can not be triangulated (unknown format)")
        if obj.reason:
            print(f"      {obj.reason}")

    report(obj.metrics, source, target, time.time() - time_start)

    return 0 if triangulated else 1


if __name__ == "__main__":
    sys.exit(main())
