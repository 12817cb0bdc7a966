import numpy as np
import pytest

import pfh.nacamesh as nm


def request(code, n, **kwargs):
    return nm.AirfoilRequest(code, n, **kwargs)


@pytest.mark.parametrize(
    "code, m, p, t",
    [
        ("2412", 0.02, 0.4, 0.12),
        ("0015", 0.0, 0.0, 0.15),
        ("9999", 0.09, 0.9, 0.99),
        (12, 0.0, 0.0, 0.12),
        ([4, 4, 1, 5], 0.04, 0.4, 0.15),
    ],
)
def test_parameters(code, m, p, t):
    naca = nm.NACA(code)
    assert naca.m == pytest.approx(m)
    assert naca.p == pytest.approx(p)
    assert naca.tcr == pytest.approx(t)


def test_code_text():
    naca = nm.NACA(12)
    assert str(naca) == "0012"
    assert naca.digits == (0, 0, 1, 2)
    assert naca == nm.NACA("0012")
    assert repr(naca) == "NACA('0012')"


@pytest.mark.parametrize("code", ["12", "12a3", "00123", " 012", "００12", -1, 10000])
def test_invalid_codes(code):
    with pytest.raises(nm.exceptions.ValidationError):
        nm.NACA(code)


@pytest.mark.parametrize(
    "code, symmetric",
    [("0012", True), ("0000", True), ("2412", False), ("0412", False), ("2012", False)],
)
def test_symmetric_flag(code, symmetric):
    assert nm.NACA(code).symmetric is symmetric


@pytest.mark.parametrize("spacing", list(nm.Spacing))
@pytest.mark.parametrize("n", [3, 4, 50, 1000])
def test_chord_stations(spacing, n):
    x = nm.airfoil.chord_stations(n, spacing)
    assert x.shape == (n,)
    assert x[0] == 0
    assert x[-1] == 1
    assert np.all(np.diff(x) > 0)


def test_quadratic_spacing_is_front_loaded():
    x = nm.airfoil.chord_stations(5, "quadratic")
    assert np.allclose(x, [0, 1 / 16, 1 / 4, 9 / 16, 1])
    x = nm.airfoil.chord_stations(5, "linear")
    assert np.allclose(x, [0, 0.25, 0.5, 0.75, 1])


def test_thickness_polynomial():
    # The closed trailing edge coefficients sum to zero at `x = 1`
    naca = nm.NACA("0012")
    assert naca.thickness([1.0])[0] == pytest.approx(0, abs=1e-12)
    # Maximum thickness of a NACA 4-digit section is at 30% chord
    x = np.linspace(0, 1, 1001)
    t = naca.thickness(x)
    assert x[np.argmax(t)] == pytest.approx(0.3, abs=0.01)
    assert 2 * t.max() == pytest.approx(0.12, abs=1e-3)


def test_chord_range_checked():
    with pytest.raises(ValueError):
        nm.NACA("2412").camber([-0.1, 0.5])
    with pytest.raises(ValueError):
        nm.NACA("2412").thickness([1.5])


def test_symmetric_profile():
    profile = nm.generate_profile(request("0012", 50))
    assert profile.resolution == 50
    assert np.all(profile.camber == 0)
    assert np.all(profile.offset[:, 0] == 0)
    assert np.array_equal(profile.offset[:, 1], profile.thickness)
    assert profile.thickness[0] == 0
    assert profile.thickness[-1] == 0
    assert np.all(profile.thickness[1:-1] > 0)

    upper, lower = profile.upper(), profile.lower()
    assert np.array_equal(upper[:, 0], lower[:, 0])
    assert np.array_equal(upper[:, 1], -lower[:, 1])


def test_cambered_profile():
    profile = nm.generate_profile(request("2412", 10))
    x = profile.x
    assert profile.camber[0] == 0
    assert profile.camber[-1] == 0
    assert profile.thickness[0] == 0
    assert profile.thickness[-1] == 0

    # The peak camber is at the station nearest the max camber position
    assert np.argmax(profile.camber) == np.argmin(np.abs(x - 0.4))
    assert np.all(profile.camber[1:-1] > 0)
    assert np.all(profile.camber <= 0.02)

    # Surfaces are offset perpendicular to the camber line by the thickness
    assert np.allclose(np.linalg.norm(profile.offset, axis=1), profile.thickness)
    mid = (profile.upper() + profile.lower()) / 2
    assert np.allclose(mid, np.c_[x, profile.camber])
    assert np.any(profile.offset[1:-1, 0] != 0)


def test_camber_continuity():
    naca = nm.NACA("2412")
    p, eps = naca.p, 1e-9
    y = naca.camber([p - eps, p, p + eps])
    assert y[1] == pytest.approx(naca.m)
    assert abs(y[0] - y[2]) < 1e-8
    theta = naca.theta([p - eps, p, p + eps])
    assert np.allclose(theta, 0, atol=1e-8)


def test_camber_slope_sign():
    naca = nm.NACA("4415")
    theta = naca.theta([0.1, 0.39, 0.41, 0.9])
    assert np.all(theta[:2] > 0)
    assert np.all(theta[2:] < 0)


def test_zero_camber_position():
    # `p == 0` never takes the forward branch, so nothing divides by zero
    profile = nm.generate_profile(request("2012", 20))
    for a in (profile.camber, profile.offset, profile.upper(), profile.lower()):
        assert np.all(np.isfinite(a))
    assert profile.camber[0] == 0
    assert profile.camber[-1] == 0


def test_zero_camber_with_position():
    profile = nm.generate_profile(request("0412", 20))
    assert np.all(profile.camber == 0)
    assert np.allclose(profile.offset[:, 0], 0)
    assert np.allclose(profile.offset[:, 1], profile.thickness)


def test_vertical_convention():
    profile = nm.generate_profile(request("2412", 20, convention="vertical"))
    assert np.all(profile.offset[:, 0] == 0)
    assert np.array_equal(profile.upper()[:, 0], profile.x)
    assert np.allclose(profile.upper()[:, 1], profile.camber + profile.thickness)


def test_profile_is_read_only():
    profile = nm.generate_profile(request("0012", 10))
    with pytest.raises(ValueError):
        profile.thickness[3] = 1.0
