# nurbskit

Pure-Python routines for evaluating Bezier, B-spline and rational (NURBS)
curves and surfaces. It has no runtime dependencies.

## Installation

```
pip install nurbskit
```

## Conventions

- Functions return their results; nothing is filled in through arguments.
- Inputs that cannot be evaluated (empty control points, too few knots, a
  parameter outside the knot range, a negative degree or derivative order,
  a zero weight) raise `ValueError`.
- In the B-spline modules a control point may be a plain number or a tuple of
  coordinates; all points passed to one call should have the same form.
  Results have the same form as the control points.
- `n` is the number of control points minus one, `p` (and `q`) the degree,
  `U` (and `V`) the knot vector, as in the usual B-spline notation.
- Rational routines take homogeneous control points `(w*x, w*y, ..., w)`,
  weight last, and return the Cartesian point.

## Modules

- `nurbskit.bezier`: power-basis and Bezier evaluation.
  `horner1(a, u0)` evaluates `sum(a[i] * u0**i)`; `horner2(a, u0, v0)` does the
  same for a surface with `a[i][j]` the coefficient of `u**i * v**j`.
  `bernstein(i, n, u)` and `all_bernstein(n, u)` give Bernstein polynomial
  values. `point_on_bezier_curve(P, u)` and `de_casteljau1(P, u)` evaluate a
  Bezier curve with scalar control points; `de_casteljau2(P, u0, v0)` evaluates
  a Bezier surface with `P[j][i]` the point of v-index `j` and u-index `i`.
- `nurbskit.basis`: B-spline basis functions. `find_span`, `basis_funs`,
  `all_basis_funs` (basis values of every degree `0..p`),
  `ders_basis_funs` (values and derivatives), `one_basis_fun` and
  `ders_one_basis_fun` (a single basis function and its derivatives).
- `nurbskit.curve`: B-spline curves. `curve_point`, `curve_derivs_alg1`
  (derivatives from basis-function derivatives), `curve_deriv_cpts` (control
  points of the derivative curves) and `curve_derivs_alg2` (derivatives from
  those control points).
- `nurbskit.surface`: B-spline surfaces with control net `P[i][j]`
  (u-index `i`, v-index `j`). `surface_point` and `surface_derivs_alg1`, which
  returns a `(d + 1) x (d + 1)` table `SKL[k][l]` of partial derivatives.
- `nurbskit.surface_derivs`: `surface_deriv_cpts` gives the control points
  `PKL[k][l][i][j]` of the derivative surfaces of a sub-net, and
  `surface_derivs_alg2` evaluates surface derivatives from them.
- `nurbskit.rational`: `rat_curve_point`, `rat_surface_point`, and
  `rat_curve_derivs(Aders, wders, d)`, which turns derivatives of the weighted
  curve `A` and of the weight `w` into derivatives of `C = A / w`.
- `nurbskit.knots`: `unclamp_curve(n, p, U, Pw)` unclamps a clamped curve at
  both ends without changing its shape and returns the new knots and control
  points, leaving the inputs untouched.

## Example

```python
from nurbskit.bezier import de_casteljau1, point_on_bezier_curve
from nurbskit.basis import find_span, basis_funs
from nurbskit.curve import curve_point, curve_derivs_alg1
from nurbskit.rational import rat_curve_point

# A cubic Bezier curve in one dimension, evaluated at u = 0.5
print(de_casteljau1([1.0, 2.0, 3.0, 4.0], 0.5))          # 2.5
print(point_on_bezier_curve([1.0, 2.0, 3.0, 4.0], 0.5))  # 2.5

# A quadratic B-spline curve in the plane
U = [0.0, 0.0, 0.0, 0.5, 1.0, 1.0, 1.0]
P = [(0.0, 0.0), (1.0, 2.0), (3.0, 2.0), (4.0, 0.0)]
n, p = len(P) - 1, 2
span = find_span(n, p, 0.25, U)
print(basis_funs(span, 0.25, p, U))
print(curve_point(n, p, U, P, 0.25))
print(curve_derivs_alg1(n, p, U, P, 0.25, 2))

# The same net as a rational curve with all weights 1
Pw = [(x, y, 1.0) for x, y in P]
print(rat_curve_point(n, p, U, Pw, 0.25))
```

## What it does not do

The package only evaluates curves and surfaces and unclamps curves. It has no
command-line tool, no file input or output, and no construction routines such
as knot insertion, degree elevation, interpolation, fitting, swept or
skinned surfaces.

## Running the tests

```
pip install "nurbskit[test]"
pytest
```