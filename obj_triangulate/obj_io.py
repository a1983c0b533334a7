"""
OBJ Triangulation I/O Module

This module rewrites a Wavefront OBJ file so that it contains triangles
only. The source is streamed line by line: vertex records build up the
vertex table, faces with more than 3 corners are split by the configured
engine, and every other line is copied through.

The target starts with a fixed-width comment header. It is written once
with zero counts before the body and rewritten in place once the final
counts are known, so the target must be a seekable file.
"""

import os
import re
import sys
from typing import Dict, Iterable, List, Optional, TextIO, Tuple

from .config import TriangulateConfig, ENGINE_EARCUT
from .earcut_tri import triangulate_earcut
from .errors import (
    TriangulateError, FormatError, NotTriangulatableError,
    DegenerateGeometryError,
)
from .mesh_component import Metrics, Point, Triangle
from .obj_tri import triangulate
from .polygon import normal
from .vector import dot

INDEX_PATTERN = re.compile(r"[+-]?\d+")

# Widest value a counter can print, so the header never grows on rewrite
COUNTER_WIDTH = len(str(2 ** 64 - 1))

WINDING_THRESHOLD = -0.5


def list_index(index: int, list_size: int) -> int:
    """
    Convert an OBJ face index to a 0-based list index.

    Positive indices are 1-based, zero and negative ones count back from
    the end of the list.
    """
    return index - 1 if index > 0 else index + list_size


def parse_vertex(parts: List[str]) -> Tuple[float, float, float]:
    """
    Parse the position of a vertex record.

    Args:
        parts: Whitespace-separated tokens of the line, starting with "v"

    Returns:
        (x, y, z); any further values (w, colors) are ignored

    Raises:
        FormatError: if fewer than 3 numbers follow the tag
    """
    if len(parts) < 4:
        raise FormatError("Vertex record has fewer than 3 coordinates")

    try:
        return (float(parts[1]), float(parts[2]), float(parts[3]))
    except ValueError as e:
        raise FormatError(f"Invalid vertex coordinate: {e}") from e


def parse_corner_index(token: str) -> int:
    """Parse the leading vertex index of a face corner such as 12/4/7."""
    match = INDEX_PATTERN.match(token)

    if match is None:
        raise FormatError(f"Invalid face corner: {token}")

    return int(match.group())


def can_triangulate(lines: Iterable[str]) -> bool:
    """
    Check that a source holds a vertex and at least one face to split.

    Args:
        lines: Source lines

    Returns:
        True once both a vertex record and a face with more than 3 corners
        have been found
    """
    vertex = polygon = False

    for line in lines:
        parts = line.split()

        if not parts:
            continue

        if parts[0] == "v":
            vertex = True
        elif parts[0] == "f" and not polygon and len(parts) > 4:
            try:
                for token in parts[1:]:
                    parse_corner_index(token)
                polygon = True
            except FormatError:
                pass

        if vertex and polygon:
            return True

    return False


def _counter(value: int) -> str:
    return str(value).rjust(COUNTER_WIDTH)


def header_text(source_name: str, metrics: Metrics) -> str:
    """
    Build the comment header of a triangulated file.

    The text has the same length for any counter values, which lets the
    final header overwrite the placeholder written before the body.
    """
    lines = [
        "# Triangulated OBJ File",
        "",
        f"# Original file name : {source_name}",
        f"#          Vertices  : {_counter(metrics.vertices)}",
        f"#          Polygons  : {_counter(metrics.polygons_seen)}",
        f"#          Triangles : {_counter(metrics.triangles_existing)}",
        "",
        "# This triangulated file",
        f"#          Polygons  : {_counter(metrics.polygons_remaining)}",
        f"#          Triangles : {_counter(metrics.triangles_existing)}"
        f" + {_counter(metrics.triangles_created)} created",
        "",
        f"# Total triangles after triangulation : {_counter(metrics.total_triangles)}",
        "",
        "# Please note that any comments regarding the number of triangles and faces below,",
        "# originating from the original file, will be incorrect for this triangulated file.",
        "# Please update or remove old metrics information.",
        "#" + "_" * 100,
        "#",
        "",
    ]
    return "\n".join(lines) + "\n"


class ObjRewriter:
    """
    Rewrites OBJ records one line at a time.

    Holds the vertex table of the file read so far and updates the shared
    Metrics as records go by.
    """

    def __init__(self, config: Optional[TriangulateConfig] = None,
                 metrics: Optional[Metrics] = None):
        self.config = config if config is not None else TriangulateConfig()
        self.metrics = metrics if metrics is not None else Metrics()
        self.vertices: List[Tuple[float, float, float]] = []

        if self.config.engine == ENGINE_EARCUT:
            self._engine = triangulate_earcut
        else:
            self._engine = triangulate

    def rewrite(self, line: str) -> str:
        """
        Rewrite a single source line.

        Args:
            line: Raw source line

        Returns:
            Replacement text without trailing newline; several face records
            are separated by newlines

        Raises:
            FormatError: if a vertex or face record cannot be parsed
            DegenerateGeometryError: if a face cannot be triangulated
        """
        line = line.strip()
        parts = line.split()

        if not parts:
            return line

        if parts[0] == "v":
            self.vertices.append(parse_vertex(parts))
            self.metrics.vertices += 1
            return line

        if parts[0] == "f":
            return self._rewrite_face(parts, line)

        return line

    def resolve(self, token: str) -> int:
        """Resolve a face corner to a 0-based index into the vertex table."""
        size = len(self.vertices)
        index = list_index(parse_corner_index(token), size)

        if not 0 <= index < size:
            raise FormatError(f"Face corner {token} refers to an unknown vertex")

        return index

    def _rewrite_face(self, parts: List[str], line: str) -> str:
        tokens = parts[1:]
        indices = [self.resolve(token) for token in tokens]

        if len(tokens) < 3:
            raise DegenerateGeometryError("Face has fewer than 3 corners", line)

        if len(tokens) == 3:
            self.metrics.triangles_existing += 1
            return line

        self.metrics.polygons_seen += 1

        # Corners sharing a vertex share a local index and the first token
        local_index: Dict[int, int] = {}
        corner_text: List[str] = []
        polygon: List[Point] = []

        for token, index in zip(tokens, indices):
            if index not in local_index:
                local_index[index] = len(corner_text)
                corner_text.append(token)

            x, y, z = self.vertices[index]
            polygon.append(Point(local_index[index], x, y, z))

        triangles = self._engine(polygon)

        if not triangles:
            raise DegenerateGeometryError("Face can not be triangulated", line)

        if self.config.preserve_winding:
            triangles = orient_triangles(triangles, polygon)

        records = []
        for triangle in triangles:
            records.append("f " + " ".join(corner_text[i] for i in triangle.indices))

        self.metrics.triangles_created += len(triangles)
        self.metrics.polygons_expanded += 1

        return "\n".join(records)


def orient_triangles(triangles: List[Triangle], polygon: List[Point]) -> List[Triangle]:
    """
    Flip triangles whose normal points away from the polygon's normal.

    Args:
        triangles: Triangles of the polygon
        polygon: Source polygon, in face order

    Returns:
        Triangles wound like the source face
    """
    f_normal = normal(polygon)
    oriented = []

    for triangle in triangles:
        t_normal = normal(list(triangle.points))

        if dot(f_normal, t_normal) < WINDING_THRESHOLD:
            triangle = triangle.reversed()

        oriented.append(triangle)

    return oriented


class ObjTriangulator:
    """
    Converts an OBJ file into a triangulated copy.

    Usage:
        obj = ObjTriangulator()
        if not obj.convert("lego.obj", "lego.triangulated.obj"):
            print(obj.reason)
    """

    def __init__(self, config: Optional[TriangulateConfig] = None):
        self.config = config if config is not None else TriangulateConfig()
        self.metrics = Metrics()
        self.reason: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """True when the last source had no convertible geometry."""
        return self.metrics.empty

    def convert(self, source_path, target_path) -> bool:
        """
        Triangulate source_path into target_path.

        Args:
            source_path: OBJ file to read
            target_path: OBJ file to (over)write

        Returns:
            True on success; on failure reason tells why
        """
        self.metrics = Metrics()
        self.reason = None

        try:
            if os.path.exists(target_path) and os.path.samefile(source_path, target_path):
                raise TriangulateError(f"Target is the source file: {target_path}")

            with open(source_path, "r", encoding="utf-8",
                      errors="surrogateescape") as source:
                if not can_triangulate(source):
                    raise NotTriangulatableError(
                        "No vertices or no polygons with more than 3 corners")

                source.seek(0)

                with open(target_path, "w", encoding="utf-8",
                          errors="surrogateescape", newline="\n") as target:
                    self._write_body(source, target, os.path.basename(source_path))
        except OSError as e:
            return self._error(f"Impossible to open obj file: {e}")
        except TriangulateError as e:
            return self._error(str(e))

        return True

    def _write_body(self, source: TextIO, target: TextIO, source_name: str):
        target.write(header_text(source_name, self.metrics))

        rewriter = ObjRewriter(self.config, self.metrics)

        for line_number, line in enumerate(source, start=1):
            try:
                text = rewriter.rewrite(line)
            except (FormatError, DegenerateGeometryError) as e:
                if self.config.abort_on_failure:
                    raise type(e)(f"Line {line_number}: {e}", e.line or line.strip()) from e
                print(f"Warning: line {line_number} skipped: {e}", file=sys.stderr)
                continue

            target.write(text)
            target.write("\n")

        target.seek(0)
        target.write(header_text(source_name, self.metrics))

    def _error(self, reason: str) -> bool:
        self.reason = reason
        return False


def triangulate_obj(source_path, target_path,
                    config: Optional[TriangulateConfig] = None) -> ObjTriangulator:
    """
    Convert a file and return the triangulator for its metrics and status.
    """
    obj = ObjTriangulator(config)
    obj.convert(source_path, target_path)
    return obj
