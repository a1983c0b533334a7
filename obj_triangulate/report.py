"""
Console Report Module

Human readable summary printed after a conversion: file sizes, face
metrics and execution time. Nothing here affects the converted file.
"""

import os
from pathlib import Path
from typing import Optional

from .mesh_component import Metrics

INDENT = " " * 5
RULE = "-" * 50
SIZE_UNITS = [" bytes", "KB", "MB", "GB", "TB"]


def thousands(value: int, separator: str = ".") -> str:
    """Group the digits of value in thousands, e.g. 1234567 -> 1.234.567."""
    return f"{value:,}".replace(",", separator)


def byte_text(size_bytes: int) -> str:
    """
    Format a byte count with a binary unit and no decimals.

    Args:
        size_bytes: Number of bytes

    Returns:
        Text such as "512 bytes" or "3MB"
    """
    unit_index = 0
    size = float(size_bytes)

    while size >= 1024.0 and unit_index < len(SIZE_UNITS) - 1:
        size /= 1024.0
        unit_index += 1

    return f"{size:.0f}{SIZE_UNITS[unit_index]}"


def stopwatch(elapsed: float) -> str:
    """
    Format an elapsed time given in seconds.

    At least one minute is shown as HH:MM:SS; shorter times use the
    largest non-zero unit out of seconds, milliseconds and microseconds.
    """
    micro = int(round(elapsed * 1_000_000))

    hours, rest = divmod(micro, 3_600_000_000)
    minutes, rest = divmod(rest, 60_000_000)
    seconds, rest = divmod(rest, 1_000_000)
    milliseconds, microseconds = divmod(rest, 1_000)

    if minutes > 0 or hours > 0:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    if seconds > 0:
        return f"{seconds} seconds"
    if milliseconds > 0:
        return f"{milliseconds} milliseconds"
    return f"{microseconds} microseconds"


def file_size(path) -> str:
    """Size of a file as byte_text, or an empty string if it is missing."""
    try:
        return byte_text(os.stat(path).st_size)
    except OSError:
        return ""


def file_extend(source, target) -> str:
    """
    Describe how much the target grew or shrank compared to the source.

    Returns:
        "+<size>", "-<size>", or an empty string when the sizes are equal
        or a file is missing
    """
    try:
        byte_source = os.stat(source).st_size
        byte_target = os.stat(target).st_size
    except OSError:
        return ""

    if byte_source == byte_target:
        return ""

    if byte_source < byte_target:
        return "+" + byte_text(byte_target - byte_source)

    return "-" + byte_text(byte_source - byte_target)


def report(metrics: Metrics, source, target, elapsed: Optional[float] = None):
    """
    Print the conversion summary.

    Args:
        metrics: Metrics of the finished conversion
        source: Source file path
        target: Target file path
        elapsed: Execution time in seconds, omitted when None
    """
    if metrics.empty:
        return

    print()
    print(INDENT + RULE)
    print(f"{INDENT}{Path(target).name} {file_size(target)}")
    print(INDENT + RULE)
    print(INDENT + "Face metrics")
    print(INDENT + RULE)
    print(f"{INDENT}Polygons triangulated : {thousands(metrics.polygons_expanded)}")
    print(f"{INDENT}Existing triangles    : {thousands(metrics.triangles_existing)}")
    print(f"{INDENT}Created triangles     : {thousands(metrics.triangles_created)}"
          f"  {file_extend(source, target)}")
    print(INDENT + RULE)
    print(f"{INDENT}Total triangles       : {thousands(metrics.total_triangles)}")
    print(f"{INDENT}Total vertices        : {thousands(metrics.vertices)}")
    print(INDENT + RULE)
    if elapsed is not None:
        print(f"{INDENT}Execution time        : {stopwatch(elapsed)}")
        print(INDENT + RULE)
    print()
