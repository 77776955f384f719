# numerik

A small collection of classic numerical methods, written with NumPy:

- LR (LU) decomposition without pivoting
- forward and central finite-difference Jacobians, with error measures
- a Newton iteration whose derivative is a difference quotient
- the explicit Euler method for y' = t + y, compared with the exact solution
- least-squares fits through the normal equations, with a condition
  estimate from eigenvalues
- basic helpers: temperature conversion, quadratic roots and
  matrix-vector products, plus reading and writing matrices as text

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
import numpy as np

from numerik.basics import fahrenheit_to_celsius, quadratic_roots, matrix_vector
from numerik.lu import lr_decomposition
from numerik.jacobian import example_function, jacobian_central, analytic_jacobian

print(fahrenheit_to_celsius(212.0))          # 100.0
print(quadratic_roots(1.0, -2.0, -3.0))      # (3.0, -1.0)
print(matrix_vector([[1, 2], [3, 4]], [1, 1]))  # [3.0, 7.0]

a = np.array([[4.0, 3.0, 1.0], [11.0, 9.0, 10.0], [6.0, 9.0, 9.0]])
l, r = lr_decomposition(a)
print(l @ r)

x = np.array([2.1, 0.5, 3.0])
print(jacobian_central(example_function, x, 0.1))
print(analytic_jacobian(x))
```

Modules:

| Module | Contents |
| --- | --- |
| `numerik.basics` | `fahrenheit_to_celsius`, `quadratic_roots` (two, one or no real roots as a tuple), `mnf` (both roots or `None`), `matrix_vector` |
| `numerik.matrix_io` | `read_matrix_vector_file`, `write_matrix_vector_report`, `read_matrix`, `save_matrix`, `add_matrix_files` |
| `numerik.jacobian` | `example_function`, `analytic_jacobian`, `jacobian_forward`, `jacobian_central`, `absolute_error`, `relative_error`, `optimal_step_index`, `error_table` |
| `numerik.lu` | `lr_decomposition` (raises `ValueError` for non-square input or a zero pivot) |
| `numerik.secant` | `quadratic`, `difference_quotient`, `newton_iteration`, `write_iterations` |
| `numerik.euler` | `exact_solution`, `relative_error`, `explicit_euler`, `write_table` |
| `numerik.regression` | `Experiment`, `read_experiment`, `quadratic_design_matrix`, `quartic_design_matrix`, `normal_equations`, `condition_from_eigenvalues`, `save_matrix_text` |

## Text formats

`read_matrix_vector_file` reads whitespace-separated tokens: the row and
column count, the matrix entries row by row, then a vector with as many
entries as there are columns. `read_matrix` reads the row and column count
followed by integer entries. `read_experiment` reads a row and column count
followed by one `w_pa d p` triple per row.

## Commands

| Command | What it does |
| --- | --- |
| `numerik-matrix product INPUT OUTPUT` | reads a matrix and a vector from `INPUT` and writes the matrix, the vector and their product to `OUTPUT` |
| `numerik-matrix add FIRST SECOND [-o OUTPUT]` | adds the matrices in two files, prints the sum and saves it to `OUTPUT` (default `Output.dat`) |
| `numerik-jacobian` | prints the analytic Jacobian of the example function at (2.1, 0.5, 3.0), the forward and central approximations for h = 0.1, an error table for h = 10⁻¹ … 10⁻¹², and the row whose forward absolute error is smallest |
| `numerik-lu` | decomposes a fixed 3×3 matrix into L and R and prints L, R and the product L R |
| `numerik-secant [--no-plot]` | runs the Newton iteration on x² − 2x − 3 from −2 and from 42, writes the iterates to `output_minus2.txt` and `output_42.txt`, then runs `gnuplot Plot2_1.gpl` |
| `numerik-euler [--no-plot]` | solves y' = t + y, y(0) = 1 on [0, 2] with h = 0.5 and h = 0.01, writes `h0.5.txt` and `h0.01.txt`, then runs `gnuplot Plot_A3.gpl` |
| `numerik-regression [a\|b\|c] [--input FILE] [--no-plot]` | reads the experiment data (default `Experiment.txt`); `a` fits the quadratic model and saves `MAT_a.txt`, `b` fits the quartic model and saves `MAT_b.txt`, `c` (the default) builds both systems, saves both files and prints their eigenvalues and the ratio of largest to smallest eigenvalue. Parts `a` and `b` then run `gnuplot Plot.gpl` or `gnuplot zweitePlot.gpl` |

All output files are written to the current directory. Run any command
with `--help` to see its options.

## What the package does not do

- The gnuplot scripts named above are not part of the package. The commands
  look for them in the current directory and only start `gnuplot` when it is
  installed; otherwise they print a note and carry on. Use `--no-plot` to skip
  plotting altogether.
- The commands take their input from arguments and files; they do not prompt
  for values. Temperature conversion and quadratic roots are available only
  as library functions, not as commands.
- Linear systems in `numerik-regression` are solved with NumPy's solver, not
  with `lr_decomposition`.