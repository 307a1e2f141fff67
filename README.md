# meshgen2d

Small building blocks for two-dimensional structured meshes: points, a
structured grid, straight lines and polynomials, and small dense matrices.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
meshgen2d
```

The command takes no options apart from `--help`. It prints `hi` and exits with status 0.

## Points: `meshgen2d.point`

`Point(coords)` stores coordinates of any dimension.

- `+` and `-` work element by element. Points of different dimensions raise `ValueError`.
- `p[i]` reads a coordinate and `p[i] = v` sets one.
- `len(p)` and `p.dimensions()` give the number of coordinates, and the point can be iterated.
- `x`, `y` and `z` are properties. Asking for one the point does not have raises `AttributeError`.
- Points compare by their coordinates, for both equality and ordering.
- `Point.origin(n)` gives the n-dimensional zero point.

```python
from meshgen2d.point import Point

p = Point([1, 2, 3]) + Point([4, 5, 6])
print(p)                # (5, 7, 9)
print(p.x, p.z)         # 5 9
print(Point.origin(2))  # (0, 0)
```

## Grids: `meshgen2d.grid`

`Grid2D(nx, ny)` collects `GridPoint2D(i, j, x, y)` nodes. Each call to
`add_point(x, y)` assigns the next `(i, j)` index, with `i` varying fastest.
Once all `nx * ny` nodes are present, further calls are ignored.

- `num_pts()` returns the number of nodes added.
- `points` returns the nodes as a tuple.
- `extents()` returns `(min_x, max_x, min_y, max_y)`. The bounds always take in the origin, so they start from 0.

A dimension below 1 raises `ValueError`.

```python
from meshgen2d.grid import Grid2D

grid = Grid2D(2, 2)
for x, y in [(1, 1), (2, 1), (1, 2), (2, 2)]:
    grid.add_point(x, y)
print(grid.num_pts())   # 4
print(grid.extents())   # (0.0, 2, 0.0, 2)
```

## Geometry: `meshgen2d.geometry`

### Straight lines

`StraightLine2D(m, c)` is the line `y = m x + c`.

- `solve(x)` evaluates the line at `x`.
- `eqn()` returns the line as a callable.
- `StraightLine2D.from_cartesian_points(p1, p2)` builds the line through two `Cartesian2D` points. It raises `ValueError` when the points share an x coordinate.
- `str()` gives a form such as `y = 2.00x + 3.00`.

### Polynomials

`Polynomial(coefs)` takes coefficients in descending powers. It raises `ValueError` if there are none.

- `order()` returns the degree.
- `solve(x)` and `eqn()` evaluate the polynomial.
- `roots()` returns every complex root, found by Durand–Kerner iteration.
- `real_roots()` keeps the roots whose imaginary part is below `1e-8`.

```python
from meshgen2d.geometry import Polynomial

poly = Polynomial([1.0, -5.0, 6.0])
print(poly)               # y = 1.00x^2 - 5.00x + 6.00
print(poly.solve(4.0))    # 2.0
print(poly.real_roots())  # approximately [2.0, 3.0], in some order
```

## Matrices: `meshgen2d.matrices`

`Matrix(rows, cols, data)` is a dense row-major matrix. If `data` is omitted, the matrix is all zeros.

- Constructors: `zeros`, `ones`, `fill`, `identity` and `from_list`.
- `+` and `-` need equal dimensions. `@` is the matrix product and needs matching inner dimensions. A mismatch raises `ValueError`.
- Elements are read and set with `m[i, j]`. An index out of range raises `IndexError`.
- `transpose()`, `dims()` and `==` are also provided.

`AugmentedMatrix(a, b)` pairs a square matrix `a` with a matching column vector `b`.
Its `lu_decomposition()` returns `(L, U)` with `a == L @ U`. It uses elimination without pivoting.

```python
from meshgen2d.matrices import Matrix

a = Matrix.from_list(2, 3, [1, 2, 3, 4, 5, 6])
b = Matrix.from_list(3, 2, [7, 8, 9, 10, 11, 12])
print((a @ b).data)   # [58, 64, 139, 154]
```

## What the package does not do

- It does not generate meshes by itself. The `meshgen2d` command only prints a greeting.
- It does not plot anything.
- Matrices have no inverse or determinant.
- Nothing is solved from an `AugmentedMatrix` beyond its LU factors.
- There is no curve fitting such as B-splines.