# checkedcases

A collection of small, self-contained computations that do not just produce an
answer: each one also explains how the answer was reached and then verifies it
with an independent check.

Every case prints the same three sections:

- **Answer**: the conclusion in one sentence.
- **Reason Why**: the figures the conclusion rests on.
- **Check**: a list of `yes`/`no` verifications.

Each command exits with status 0 when every check passes and 1 otherwise, so
the cases can serve as quick regression checks in scripts.

No third-party dependencies are needed. Python 3.10 or later is enough.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The cases

| Command | Module | What it does |
| --- | --- | --- |
| `checkedcases-collatz` | `collatz` | Runs the Collatz map for every start from 1 to 10,000. It memoizes stopping times and verifies the longest-trace and highest-peak witnesses. |
| `checkedcases-control-system` | `control_system` | Derives a helper measurement and two actuator outputs from rule formulas, then recomputes each one. |
| `checkedcases-deep-taxonomy` | `deep_taxonomy` | Follows the implication chain N(i) → N(i+1), I(i+1), J(i+1) up to N(100000), then A2 and the goal, and checks the fact count. |
| `checkedcases-euler-identity` | `euler_identity` | Shows exp(iπ) + 1 = 0 in exact integer complex arithmetic. |
| `checkedcases-fibonacci` | `fibonacci` | Computes exact Fibonacci numbers up to F(10000), cross-checked with fast doubling and Cassini's identity. |
| `checkedcases-matrix-mechanics` | `matrix_mechanics` | Multiplies small 2×2 integer matrices to show a non-zero commutator [H, X]. |
| `checkedcases-goldbach` | `goldbach` | Counts Goldbach decompositions for every even number from 4 to 1000. |
| `checkedcases-kaprekar` | `kaprekar` | Applies Kaprekar's routine to every non-repdigit four-digit start and confirms that it reaches 6174 within seven steps. |
| `checkedcases-pn-junction` | `pn_junction` | A toy tunnelling model. It measures state overlap as forward bias shifts and shows a peak followed by a negative differential region. |
| `checkedcases-transistor-switch` | `transistor_switch` | An NPN low-side switch model, in cutoff for a low input and in saturation for a high input. |
| `checkedcases-polynomial` | `polynomial` | Solves a real and a complex quartic with Durand–Kerner, substitutes the roots back and rebuilds the coefficients. |
| `checkedcases-gps` | `gps` | Composes route descriptions into every route from Gent to Oostende that meets the duration, cost, belief and comfort limits. |
| `checkedcases-odrl-risk` | `odrl_risk` | Turns a small health-data agreement into permissions, needs and risk rules, then ranks the risks that arise. |
| `checkedcases-sudoku` | `sudoku` | Solves a Sudoku with forced-single propagation and minimum-remaining-values search. It checks uniqueness and replays every recorded move. |

For example:

```
checkedcases-kaprekar
checkedcases-sudoku
```

### Command options

Most commands take no options beyond `--help`. These do:

- `checkedcases-collatz --max-start N --sample-start S` checks starts `1..=N`
  (default 10000) and reports the trace of `S` (default 27).
- `checkedcases-deep-taxonomy --max-n N` sets the length of the chain
  (default 100000).
- `checkedcases-goldbach --limit N` checks even targets up to `N`
  (default 1000, at least 4).
- `checkedcases-sudoku --puzzle TEXT` solves a puzzle of your own instead of the
  built-in one.

Sudoku puzzles are given as 81 characters read row by row. Digits `1`–`9` are
givens, and `0`, `.` or `_` mark a blank cell. A puzzle of any other length, one
with any other character, or one whose givens clash raises `ValueError`.

## Using the cases from Python

Each module has a function that builds a report and a `render` function that
turns the report into the printed text. Reports are frozen dataclasses with an
`ok` property that is true when every check passes.

- Most modules use `evaluate()`, and some of them take parameters:
  `collatz.evaluate(max_start, sample_start)`, `goldbach.evaluate(limit)`,
  `fibonacci.evaluate(targets)` and `sudoku.evaluate(puzzle_text)`.
- `deep_taxonomy` uses `derive(max_n)`.
- `polynomial.evaluate()` returns a tuple of `PolynomialCase` objects, one per
  example. `polynomial.render` takes that tuple.

```python
from checkedcases import collatz, deep_taxonomy, fibonacci, kaprekar, sudoku

report = collatz.evaluate(10000, 27)
print(collatz.render(report), end="")
print(report.ok)

print(collatz.collatz_trace(6))          # [6, 3, 10, 5, 16, 8, 4, 2, 1]
print(kaprekar.kaprekar_step(3524))      # one step of Kaprekar's routine
print(fibonacci.fibonacci_iterative(10)) # 55
print(fibonacci.fast_doubling(10))       # (55, 89)

print(deep_taxonomy.derive(10).type_facts)

report = sudoku.evaluate(
    "100007090030020008009600500005300900010080002600004000300000010040000007007000300"
)
print(sudoku.render(report), end="")
```

The lower-level functions can be used on their own:

```python
from checkedcases import goldbach, gps, polynomial

is_prime = goldbach.sieve(100)                     # primality table for 0..=100
roots = polynomial.roots_from_coeffs([1, -10, 35, -50, 24])
print(polynomial.sort_roots(roots))
print(gps.format_decimal(960000, 1000000, 3))      # "0.960"
print(gps.infer_goal_routes())                     # the two Gent -> Oostende routes
```

Invalid inputs raise `ValueError`. Examples are a Collatz start below 1, a
negative Fibonacci index, a Kaprekar value outside `0..9999` and a polynomial
with a zero leading coefficient.

## What this package does not do

Each case is a separate command. There is no single command that runs them all
or collects their results. To check every case, run the commands one after
another and look at their exit statuses, or run the test suite.