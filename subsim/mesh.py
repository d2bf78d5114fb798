"""Triangle meshes read from a simple OBJ-style text format."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from subsim.geometry import Vector

_INT = r"([+-]?\d+)"
_FACE = re.compile(
    rf"f\s*{_INT}//{_INT}\s*{_INT}//{_INT}\s*{_INT}//{_INT}"
)


@dataclass(frozen=True)
class Face:
    """A triangle given by 1-based vertex and normal numbers."""

    vertices: tuple[int, int, int]
    normals: tuple[int, int, int]


@dataclass
class Mesh:
    """Vertices, normals and triangular faces of a model."""

    vertices: list[Vector] = field(default_factory=list)
    normals: list[Vector] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)

    def triangles(self) -> Iterator[tuple[tuple[Vector, Vector], ...]]:
        """Yield each face as three (normal, vertex) pairs."""
        for face in self.faces:
            yield tuple(
                (
                    _lookup(self.normals, normal, "normal"),
                    _lookup(self.vertices, vertex, "vertex"),
                )
                for vertex, normal in zip(face.vertices, face.normals)
            )


def _lookup(items: list[Vector], number: int, kind: str) -> Vector:
    if not 1 <= number <= len(items):
        raise IndexError(f"{kind} number {number} out of range 1..{len(items)}")
    return items[number - 1]


def _three_floats(text: str, line_number: int) -> Vector:
    parts = text.split()[:3]
    try:
        if len(parts) < 3:
            raise ValueError
        x, y, z = (float(part) for part in parts)
    except ValueError:
        raise ValueError(f"line {line_number}: expected three numbers") from None
    return (x, y, z)


def parse_mesh(lines: Iterable[str]) -> Mesh:
    """Build a mesh from lines holding 'v', 'vn' and 'f a//n b//n c//n' records."""
    mesh = Mesh()
    for line_number, line in enumerate(lines, 1):
        head, second = line[:1], line[1:2]
        if head == "v" and second != "n":
            mesh.vertices.append(_three_floats(line[1:], line_number))
        elif second == "n":
            if not line.startswith("vn"):
                raise ValueError(f"line {line_number}: malformed normal record")
            mesh.normals.append(_three_floats(line[2:], line_number))
        elif head == "f":
            match = _FACE.match(line)
            if match is None:
                raise ValueError(f"line {line_number}: malformed face record")
            numbers = [int(group) for group in match.groups()]
            mesh.faces.append(
                Face(
                    vertices=(numbers[0], numbers[2], numbers[4]),
                    normals=(numbers[1], numbers[3], numbers[5]),
                )
            )
    return mesh


def load_mesh(path: str | os.PathLike[str]) -> Mesh:
    """Read a mesh file from disk."""
    with open(path, encoding="utf-8") as handle:
        return parse_mesh(handle)