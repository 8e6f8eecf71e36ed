"""Exact Fibonacci numbers cross-checked by fast doubling and Cassini's identity."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass

TARGETS = (0, 1, 10, 100, 1000, 10000)

_YES_NO = {True: "yes", False: "no"}


@dataclass(frozen=True)
class FibonacciReport:
    """Computed values and the consistency checks run on them."""

    values: tuple[tuple[int, int], ...]
    f1000_digits: int
    f10000_digits: int
    f10_ok: bool
    fast_ok: bool
    cassini_ok: bool
    f10000_last3_ok: bool

    @property
    def ok(self) -> bool:
        return (
            self.f10_ok
            and self.fast_ok
            and self.cassini_ok
            and self.f1000_digits == 209
            and self.f10000_digits == 2090
            and self.f10000_last3_ok
        )


def _check_index(n: int) -> None:
    if n < 0:
        raise ValueError(f"Fibonacci index must be non-negative, got {n}")


def fibonacci_iterative(n: int) -> int:
    """Compute F(n) with the defining recurrence."""
    _check_index(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fast_doubling(n: int) -> tuple[int, int]:
    """Return (F(n), F(n+1)) by the fast-doubling identities."""
    _check_index(n)
    if n == 0:
        return 0, 1
    a, b = fast_doubling(n // 2)
    even = a * (2 * b - a)
    odd = a * a + b * b
    if n % 2 == 0:
        return even, odd
    return odd, even + odd


def evaluate(targets: Iterable[int] = TARGETS) -> FibonacciReport:
    """Compute F(n) for each target and run the cross-checks."""
    values = {n: fibonacci_iterative(n) for n in targets}

    def value(n: int) -> int:
        return values[n] if n in values else fibonacci_iterative(n)

    f1000 = str(value(1000))
    f10000 = str(value(10000))
    f99, f100, f101 = (fibonacci_iterative(n) for n in (99, 100, 101))

    return FibonacciReport(
        values=tuple(values.items()),
        f1000_digits=len(f1000),
        f10000_digits=len(f10000),
        f10_ok=value(10) == 55,
        fast_ok=all(fast_doubling(n)[0] == v for n, v in values.items()),
        cassini_ok=f101 * f99 == f100 * f100 + 1,
        f10000_last3_ok=len(f10000) >= 3 and f10000.endswith("875"),
    )


def render(report: FibonacciReport) -> str:
    """Format the report as the three-section text summary."""
    lines = [
        "=== Answer ===",
        "The requested Fibonacci values are computed exactly, up to F(10000).",
        "",
        "=== Reason Why ===",
        "The main computation uses the defining recurrence F(n+1)=F(n)+F(n-1), and "
        "the results are cross-checked with fast doubling.",
    ]
    lines.extend(
        f"value[{i}]          : F({n}) = {v}" for i, (n, v) in enumerate(report.values)
    )
    lines += [
        f"digits in F(1000)   : {report.f1000_digits}",
        f"digits in F(10000)  : {report.f10000_digits}",
        "",
        "=== Check ===",
        f"F(10) = 55            : {_YES_NO[report.f10_ok]}",
        f"fast doubling agrees  : {_YES_NO[report.fast_ok]}",
        f"Cassini at n=100      : {_YES_NO[report.cassini_ok]}",
        f"F(1000) has 209 digits: {_YES_NO[report.f1000_digits == 209]}",
        f"F(10000) has 2090 digits: {_YES_NO[report.f10000_digits == 2090]}",
        f"F(10000) ends in 875  : {_YES_NO[report.f10000_last3_ok]}",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Compute exact Fibonacci numbers.").parse_args(argv)
    report = evaluate()
    print(render(report), end="")
    return 0 if report.ok else 1