"""Durand-Kerner root finding for polynomials with a reconstruction check."""

from __future__ import annotations

import argparse
import functools
import math
from collections.abc import Sequence
from dataclasses import dataclass

ROOT_TOL = 1e-10
COEFF_TOL = 1e-8
RESIDUAL_TOL = 1e-6
REAL_TOL = 1e-8
MAX_ITER = 200
_SEED = complex(0.4, 0.9)

CASES: tuple[tuple[str, tuple[complex, ...]], ...] = (
    ("real quartic", (1, -10, 35, -50, 24)),
    ("complex quartic", (1, complex(-9, -5), complex(14, 33), complex(24, -44), -26)),
)


@dataclass(frozen=True)
class PolynomialCase:
    """A solved polynomial together with its residual and rebuild checks."""

    label: str
    coeffs: tuple[complex, ...]
    roots: tuple[complex, ...]
    residuals: tuple[complex, ...]
    rebuilt: tuple[complex, ...]
    roots_valid: bool
    rebuild_ok: bool

    @property
    def ok(self) -> bool:
        return self.roots_valid and self.rebuild_ok


def eval_poly(coeffs: Sequence[complex], x: complex) -> complex:
    """Evaluate a polynomial given highest-degree coefficient first."""
    acc = 0j
    for c in coeffs:
        acc = acc * x + c
    return acc


def multiply_polys(left: Sequence[complex], right: Sequence[complex]) -> list[complex]:
    """Multiply two coefficient lists."""
    if not left or not right:
        raise ValueError("cannot multiply an empty polynomial")
    out = [0j] * (len(left) + len(right) - 1)
    for i, a in enumerate(left):
        for j, b in enumerate(right):
            out[i + j] += a * b
    return out


def roots_from_coeffs(coeffs: Sequence[complex]) -> list[complex]:
    """Approximate all roots with the Durand-Kerner iteration."""
    values = [complex(c) for c in coeffs]
    if len(values) < 2:
        raise ValueError("polynomial must have degree at least 1")
    lead = values[0]
    if lead == 0:
        raise ValueError("leading coefficient must be non-zero")
    monic = [c / lead for c in values]
    degree = len(values) - 1
    radius = 1.0 + max(abs(c) for c in monic[1:])
    roots = [_SEED**i * radius for i in range(degree)]

    for _ in range(MAX_ITER):
        max_delta = 0.0
        for i, root in enumerate(roots):
            denom = math.prod(
                (root - other for j, other in enumerate(roots) if j != i), start=1 + 0j
            )
            if abs(denom) < 1e-18:
                denom += complex(1e-12, 1e-12)
            delta = eval_poly(monic, root) / denom
            roots[i] = root - delta
            max_delta = max(max_delta, abs(delta))
        if max_delta < ROOT_TOL:
            break
    return roots


def _is_real(z: complex) -> bool:
    return abs(z.imag) < REAL_TOL


def _goes_before(first: complex, second: complex) -> bool:
    first_real, second_real = _is_real(first), _is_real(second)
    if first_real and second_real:
        return first.real > second.real
    if first_real:
        return False
    if second_real:
        return True
    return first.imag > second.imag or (
        abs(first.imag - second.imag) < REAL_TOL and first.real > second.real
    )


def _compare(a: complex, b: complex) -> int:
    if _goes_before(a, b):
        return -1
    if _goes_before(b, a):
        return 1
    return 0


def sort_roots(roots: Sequence[complex]) -> list[complex]:
    """Order complex roots by descending imaginary part, then real roots descending."""
    return sorted(roots, key=functools.cmp_to_key(_compare))


def format_complex(z: complex) -> str:
    """Format ``z`` with ten significant digits, dropping negligible parts."""
    re = 0.0 if abs(z.real) < REAL_TOL else z.real
    im = 0.0 if abs(z.imag) < REAL_TOL else z.imag
    if im == 0.0:
        return f"{re:.10g}"
    if re == 0.0:
        return f"{im:.10g}i"
    sign = "+" if im >= 0 else "-"
    return f"{re:.10g} {sign} {abs(im):.10g}i"


def solve_case(label: str, coeffs: Sequence[complex]) -> PolynomialCase:
    """Solve one polynomial, substitute the roots back and rebuild it."""
    original = tuple(complex(c) for c in coeffs)
    roots = sort_roots(roots_from_coeffs(original))
    rebuilt = functools.reduce(multiply_polys, ([1 + 0j, -r] for r in roots), [1 + 0j])
    residuals = [eval_poly(original, r) for r in roots]
    return PolynomialCase(
        label=label,
        coeffs=original,
        roots=tuple(roots),
        residuals=tuple(residuals),
        rebuilt=tuple(rebuilt),
        roots_valid=all(abs(r) <= RESIDUAL_TOL for r in residuals),
        rebuild_ok=len(rebuilt) == len(original)
        and all(abs(a - b) <= COEFF_TOL for a, b in zip(rebuilt, original)),
    )


def evaluate() -> tuple[PolynomialCase, ...]:
    """Solve the built-in example polynomials."""
    return tuple(solve_case(label, coeffs) for label, coeffs in CASES)


def render(cases: Sequence[PolynomialCase]) -> str:
    """Format the solved cases as the three-section text summary."""
    lines = [
        "=== Answer ===",
        "Both polynomial examples are solved consistently: the computed roots satisfy "
        "the source polynomials and reconstruct the original coefficients.",
        "",
        "=== Reason Why ===",
        "For each quartic, the program solves for the roots numerically, substitutes "
        "them back, and rebuilds the polynomial from those roots.",
    ]
    for number, case in enumerate(cases, start=1):
        lines += [
            "",
            f"Example #{number} ({case.label})",
            f"roots               : {', '.join(format_complex(r) for r in case.roots)}",
            f"residuals           : {', '.join(format_complex(r) for r in case.residuals)}",
            f"reconstruction ok   : {'yes' if case.rebuild_ok else 'no'}",
            f"roots valid         : {'yes' if case.roots_valid else 'no'}",
        ]
    all_ok = all(case.ok for case in cases)
    lines += [
        "",
        "=== Check ===",
        f"all examples valid  : {'yes' if all_ok else 'no'}",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Solve the example polynomials.").parse_args(argv)
    cases = evaluate()
    print(render(cases), end="")
    return 0 if all(case.ok for case in cases) else 1