import math

import pytest
from hypothesis import given, strategies as st

from sparkmaths.matrix import Mat4
from sparkmaths.quaternion import Quaternion
from sparkmaths.vectors import Vec3, Vec4

values = st.floats(min_value=-10, max_value=10, allow_nan=False)
nonzero = st.floats(min_value=0.5, max_value=5, allow_nan=False)
angles = st.floats(min_value=-180, max_value=180, allow_nan=False)


def sample_matrix():
    m = Mat4()
    for i in range(4):
        m.set_column(i, Vec4(i + 1, i * 2 - 3, 7 - i, i * i + 1))
    return m


def test_default_is_zero_and_diagonal_constructor():
    assert Mat4().elements == [0.0] * 16
    m = Mat4(3.0)
    assert m.column(1) == Vec4(0, 3, 0, 0)
    assert m.column(3) == Vec4(0, 0, 0, 3)


def test_column_round_trip():
    m = Mat4()
    m.set_column(2, Vec4(1, 2, 3, 4))
    assert m.column(2) == Vec4(1, 2, 3, 4)
    assert m.elements[8:12] == [1, 2, 3, 4]


@pytest.mark.parametrize("index", [-1, 4])
def test_column_out_of_range(index):
    with pytest.raises(IndexError):
        Mat4().column(index)


def test_identity_is_neutral():
    m = sample_matrix()
    assert Mat4.identity() * m == m
    assert m * Mat4.identity() == m


def test_multiply_in_place_returns_self():
    m = sample_matrix()
    result = m.multiply(Mat4(2.0))
    assert result is m
    assert m.column(0) == sample_matrix().column(0) * Vec4(2, 2, 2, 2)


def test_mul_does_not_mutate_left():
    m = sample_matrix()
    product = m * Mat4(2.0)
    assert m == sample_matrix()
    assert product != m


def test_imul_mutates():
    m = sample_matrix()
    original = m
    m *= Mat4.identity()
    assert m is original
    assert m == sample_matrix()


def test_identity_transforms_vectors_unchanged():
    assert Mat4.identity() * Vec3(1, 2, 3) == Vec3(1, 2, 3)
    assert Mat4.identity() * Vec4(1, 2, 3, 4) == Vec4(1, 2, 3, 4)


@given(values, values, values, values, values, values)
def test_translate_adds(tx, ty, tz, x, y, z):
    result = Mat4.translate(Vec3(tx, ty, tz)) * Vec3(x, y, z)
    assert [result.x, result.y, result.z] == pytest.approx([x + tx, y + ty, z + tz], abs=1e-9)


def test_translate_leaves_directions_alone():
    v = Vec4(1, 2, 3, 0)
    assert Mat4.translate(Vec3(5, 6, 7)) * v == v


@given(values, values, values, values, values, values)
def test_scale_multiplies(sx, sy, sz, x, y, z):
    result = Mat4.scale(Vec3(sx, sy, sz)) * Vec3(x, y, z)
    assert [result.x, result.y, result.z] == pytest.approx([x * sx, y * sy, z * sz], abs=1e-9)


@given(values, values, values, nonzero, nonzero, nonzero, angles)
def test_inverse_gives_identity(tx, ty, tz, sx, sy, sz, angle):
    m = Mat4.translate(Vec3(tx, ty, tz)) * Mat4.rotate(angle, Vec3.z_axis()) * Mat4.scale(Vec3(sx, sy, sz))
    assert (m * m.inverse()).elements == pytest.approx(Mat4.identity().elements, abs=1e-9)
    assert (m.inverse() * m).elements == pytest.approx(Mat4.identity().elements, abs=1e-9)


def test_invert_in_place_returns_self():
    m = Mat4.translate(Vec3(1, 2, 3))
    assert m.invert() is m
    assert m == Mat4.translate(Vec3(-1, -2, -3))


def test_singular_matrix_raises_and_is_unchanged():
    m = Mat4()
    with pytest.raises(ZeroDivisionError):
        m.invert()
    assert m == Mat4()


def test_rotate_quarter_turn_about_z():
    result = Mat4.rotate(90, Vec3.z_axis()) * Vec3.x_axis()
    assert [result.x, result.y, result.z] == pytest.approx([0.0, 1.0, 0.0], abs=1e-9)


@given(values, values, values, values, values, values, values)
def test_rotate_quaternion_matches_quaternion_rotate(qx, qy, qz, qw, x, y, z):
    q = Quaternion(qx, qy, qz, qw)
    if q.norm() < 1e-3:
        q = Quaternion.identity()
    q = q.normalize()
    v = Vec3(x, y, z)
    by_matrix = Mat4.rotate_quaternion(q) * v
    by_quaternion = Quaternion.rotate(q, v)
    assert [by_matrix.x, by_matrix.y, by_matrix.z] == pytest.approx(
        [by_quaternion.x, by_quaternion.y, by_quaternion.z], abs=1e-6
    )


def test_rotate_quaternion_of_identity():
    result = Mat4.rotate_quaternion(Quaternion.identity())
    assert result.elements == pytest.approx(
        [1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0],
        abs=1e-9,
    )


def test_orthographic_maps_bounds_symmetrically():
    m = Mat4.orthographic(-4, 8, -2, 6, 1, 50)
    low = m * Vec3(-4, -2, 1)
    high = m * Vec3(8, 6, 1)
    assert [low.x, low.y] == pytest.approx([-high.x, -high.y], abs=1e-9)
    assert m.elements[15] == Mat4.identity().elements[15]


def test_perspective_layout():
    aspect = 16 / 9
    m = Mat4.perspective(70, aspect, 0.1, 100)
    assert m.elements[11] == -1.0
    assert m.elements[15] == 1.0
    assert m.elements[0] * aspect == pytest.approx(m.elements[5])
    assert m.elements[5] == pytest.approx(1.0 / math.tan(math.radians(35)))


def test_str_of_identity():
    assert str(Mat4.identity()) == "mat4: (1, 0, 0, 0), (0, 1, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1)"


def test_str_shows_rows():
    text = str(Mat4.translate(Vec3(5, 6, 7)))
    assert text.startswith("mat4: (1, 0, 0, 5), (0, 1, 0, 6), (0, 0, 1, 7)")