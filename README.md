# sparkmaths

Lightweight maths types for 2D and 3D graphics work, in pure Python with no
dependencies:

- `Vec2`, `Vec3`, `Vec4` and the integer `IVec2` vectors (`sparkmaths.vectors`)
- `Mat4`, a column-major 4×4 matrix with projection, translation, rotation,
  scale and inversion helpers (`sparkmaths.matrix`)
- `Quaternion` and `select` for rotations (`sparkmaths.quaternion`)
- `AABB` axis-aligned bounding boxes (`sparkmaths.aabb`)
- `to_radians`, `to_degrees`, `sign` and `rsqrt` (`sparkmaths.functions`)
- `split_string`, `read_file` and a millisecond `Timer` (`sparkmaths.utils`)

## Installation

```
pip install .
```

## Example

```python
from sparkmaths.vectors import Vec3
from sparkmaths.matrix import Mat4
from sparkmaths.quaternion import Quaternion

model = Mat4.translate(Vec3(1.0, 2.0, 3.0)) * Mat4.scale(Vec3(2.0, 2.0, 2.0))
point = model * Vec3(1.0, 1.0, 1.0)          # Vec3(3.0, 4.0, 5.0)

projection = Mat4.perspective(70.0, 16 / 9, 0.1, 1000.0)
inverse = model.inverse()                     # new matrix; model is unchanged

spin = Quaternion.rotation_y(0.5)
turned = Quaternion.rotate(spin, Vec3.x_axis())
```

## Notes on behaviour

- Angles given to `Mat4.rotate` and `Mat4.perspective` are in degrees;
  quaternion rotations (`rotation`, `rotation_x`, `rotation_y`, `rotation_z`)
  take radians.
- Vector arithmetic is component-wise, and `+=`, `-=`, `*=` and `/=` update a
  vector in place. `Vec2` also accepts a number with `+` and `*`; `Vec3`
  accepts a number with all four operators. `IVec2` division truncates
  toward zero.
- `Vec3` comparisons (`<`, `<=`, `>`, `>=`) hold only when they hold for
  every component.
- `Mat4` stores its 16 values in `elements`, element `row + column * 4`.
  `m * other` returns a new matrix; `m.multiply(other)` and `m *= other`
  change `m`. Multiplying by a `Vec3` treats it as a point (w = 1).
  `invert()` works in place and raises `ZeroDivisionError` for a singular
  matrix; `inverse()` returns a copy.
- A default `Quaternion()` is the identity.
- `AABB` takes `Vec2` or `Vec3` corners (a `Vec2` gets a zero z).
  `contains` and `intersects` use strict comparisons, and `center()` returns
  `(min - max) * 0.5`.
- `split_string` keeps empty fields; `read_file` raises `OSError` when the
  file cannot be opened and stops at the first NUL character.

## Running the tests

```
pip install .[test]
pytest
```