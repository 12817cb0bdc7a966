import warnings

import numpy as np
import pytest

import pfh.nacamesh as nm
from pfh.nacamesh.normals import vertex_normals


def build(code, n, **kwargs):
    kwargs.setdefault("z_forward", False)
    return nm.build_mesh(nm.AirfoilRequest(code, n, **kwargs))


CODES = ["0012", "2412", "4415", "9999", "2012", "0000", "2400"]


@pytest.mark.parametrize("code", CODES)
@pytest.mark.parametrize("n", [3, 10, 1000])
def test_unit_length(code, n):
    normals = build(code, n).normals
    assert np.all(np.isfinite(normals))
    assert np.allclose(np.linalg.norm(normals, axis=1), 1)
    assert np.all(normals[:, 2] == 0)


@pytest.mark.parametrize("code", ["0012", "2412"])
def test_back_copies_front(code):
    mesh = build(code, 30)
    layout = mesh.layout
    assert np.array_equal(mesh.normals[layout.back], mesh.normals[layout.front])


def test_outward_orientation():
    n = 30
    mesh = build("2412", n)
    i = np.arange(1, n - 1)
    top = mesh.normals[mesh.layout.top_front(i)]
    bottom = mesh.normals[mesh.layout.bottom_front(i)]
    assert np.all(top[:, 1] > 0)
    assert np.all(bottom[:, 1] < 0)


def test_leading_edge():
    n = 20
    mesh = build("0012", n)
    layout = mesh.layout
    assert np.array_equal(mesh.normals[layout.top_front(0)], [-1, 0, 0])
    assert np.array_equal(mesh.normals[layout.bottom_front(0)], [-1, 0, 0])

    mesh = build("2412", n)
    top = mesh.normals[layout.top_front(0)]
    bottom = mesh.normals[layout.bottom_front(0)]
    assert np.array_equal(top, bottom)
    assert top[0] < -0.9


def test_trailing_edge():
    # The trailing edge uses only the last segment of each surface
    n = 10
    mesh = build("0012", n)
    v, layout = mesh.vertices, mesh.layout
    d = v[layout.top_front(n - 1), :2] - v[layout.top_front(n - 2), :2]
    expected = np.array([-d[1], d[0]]) / np.linalg.norm(d)
    assert np.allclose(mesh.normals[layout.top_front(n - 1), :2], expected)
    assert np.allclose(
        mesh.normals[layout.bottom_front(n - 1), :2], expected * [1, -1]
    )


def test_interior_averages_neighbors():
    n = 10
    mesh = build("2412", n)
    v, layout = mesh.vertices, mesh.layout
    i = 4
    d = v[layout.top_front(i + 1), :2] - v[layout.top_front(i - 1), :2]
    expected = np.array([-d[1], d[0]]) / np.linalg.norm(d)
    assert np.allclose(mesh.normals[layout.top_front(i), :2], expected)

    # Bottom is traversed backwards
    d = v[layout.bottom_front(i - 1), :2] - v[layout.bottom_front(i + 1), :2]
    expected = np.array([-d[1], d[0]]) / np.linalg.norm(d)
    assert np.allclose(mesh.normals[layout.bottom_front(i), :2], expected)


def test_symmetric_mirror():
    n = 50
    mesh = build("0012", n)
    i = np.arange(n)
    top = mesh.normals[mesh.layout.top_front(i)]
    bottom = mesh.normals[mesh.layout.bottom_front(i)]
    assert np.allclose(top[1:] * [1, -1, 1], bottom[1:])


def test_flat_plate_fallback():
    # Zero thickness: the two surfaces coincide and the nose tangent vanishes
    n = 5
    mesh = build("0000", n)
    layout = mesh.layout
    i = np.arange(n)
    assert np.allclose(mesh.normals[layout.top_front(i)], [0, 1, 0])
    assert np.allclose(mesh.normals[layout.bottom_front(i)], [0, -1, 0])


def test_coincident_stations():
    # Three coincident stations leave no tangent at the middle one, so it
    # inherits the previous normal instead of producing NaN
    top = np.array([[0, 0], [0.5, 0.1], [0.5, 0.1], [0.5, 0.1], [1, 0]])
    front = np.r_[top, top * [1, -1]]
    vertices = np.r_[np.c_[front, -np.ones(10)], np.c_[front, np.ones(10)]]
    normals = vertex_normals(vertices, 5)
    assert np.all(np.isfinite(normals))
    assert np.allclose(np.linalg.norm(normals, axis=1), 1)
    assert np.array_equal(normals[2], normals[1])
    assert np.array_equal(normals[7], normals[6])
    assert normals[1, 1] > 0
    assert normals[6, 1] < 0


def test_shape_checked():
    with pytest.raises(ValueError):
        vertex_normals(np.zeros((10, 3)), 3)


@pytest.mark.parametrize("code", ["0000", "2400"])
def test_fallback_is_silent(code):
    # Degenerate tangents are handled without numpy floating point warnings
    with warnings.catch_warnings():
        warnings.simplefilter("error", RuntimeWarning)
        normals = build(code, 10).normals
    assert np.allclose(np.linalg.norm(normals, axis=1), 1)
