"""
Reading and writing meshes as Wavefront OBJ text.

Only the subset needed for an airfoil mesh is supported: `v` vertex lines,
`vn` normal lines, and triangular `f` lines whose normal index equals the
vertex index (`f 1//1 2//2 3//3`). Coordinates are written with 9 significant
digits, enough to round-trip a 32-bit float.
"""

from __future__ import annotations

import io
import os
import pathlib
import stat
import tempfile
from typing import TextIO

import numpy as np
from loguru import logger

from pfh.nacamesh.exceptions import OutputError
from pfh.nacamesh.mesh import AirfoilMesh


__all__ = [
    "format_obj",
    "write_obj",
    "load_obj",
]


def __dir__():
    return __all__


def _dump(mesh: AirfoilMesh, f: TextIO) -> None:
    vertices = np.asarray(mesh.vertices, dtype=np.float32)
    normals = np.asarray(mesh.normals, dtype=np.float32)
    np.savetxt(f, vertices, fmt="v %.9g %.9g %.9g")
    np.savetxt(f, normals, fmt="vn %.9g %.9g %.9g")
    corners = np.repeat(np.asarray(mesh.faces) + 1, 2, axis=1)  # 1-based, `v//vn`
    np.savetxt(f, corners, fmt="f %d//%d %d//%d %d//%d")


def format_obj(mesh: AirfoilMesh) -> str:
    """Return the OBJ text for a mesh."""
    buf = io.StringIO()
    _dump(mesh, buf)
    return buf.getvalue()


def _file_mode(path: pathlib.Path) -> int:
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_obj(mesh: AirfoilMesh, path: str | os.PathLike) -> None:
    """
    Write a mesh to an OBJ file.

    The text is written to a temporary file next to `path` and then moved
    into place, so a failure never leaves a partial file behind. A new file
    gets the permissions allowed by the umask, and an existing file keeps its
    own. Symlinks are followed, so the link itself stays in place.

    Parameters
    ----------
    mesh : AirfoilMesh
        The mesh to export.
    path : path-like
        The destination file. An existing file is replaced.

    Raises
    ------
    OutputError
        If the destination cannot be written.
    """
    path = pathlib.Path(path)
    target = pathlib.Path(os.path.realpath(path))
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_name = f.name
            _dump(mesh, f)
        os.chmod(tmp_name, _file_mode(target))
        os.replace(tmp_name, target)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise OutputError(
            "Failed to open output file",
            {"path": str(path), "reason": e.strerror or str(e)},
        ) from e
    logger.info(
        "Wrote {} vertices and {} faces to {}",
        len(mesh.vertices),
        len(mesh.faces),
        path,
    )


def load_obj(f: str | os.PathLike | TextIO) -> AirfoilMesh:
    """
    Read a mesh written by `write_obj`.

    Parameters
    ----------
    f : path-like or file-like
        The OBJ file to read.

    Returns
    -------
    AirfoilMesh
    """
    if isinstance(f, (str, os.PathLike)):
        with open(f) as fh:
            return load_obj(fh)

    vertices, normals, faces = [], [], []
    for line in f:
        fields = line.split()
        if not fields or fields[0].startswith("#"):
            continue
        key, values = fields[0], fields[1:]
        if key == "v":
            vertices.append([float(s) for s in values[:3]])
        elif key == "vn":
            normals.append([float(s) for s in values[:3]])
        elif key == "f":
            if len(values) != 3:
                raise ValueError(f"Only triangular faces are supported: {line!r}")
            faces.append([int(s.split("/")[0]) - 1 for s in values])

    return AirfoilMesh(
        np.array(vertices, dtype=float).reshape(-1, 3),
        np.array(normals, dtype=float).reshape(-1, 3),
        np.array(faces, dtype=int).reshape(-1, 3),
    )
