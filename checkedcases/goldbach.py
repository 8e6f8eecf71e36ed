"""Goldbach decompositions for every even target up to a limit."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from itertools import takewhile

LIMIT = 1000
KNOWN_PRIME_COUNT = 168

_YES_NO = {True: "yes", False: "no"}


@dataclass(frozen=True)
class GoldbachReport:
    """Summary of the Goldbach sweep and its checks."""

    limit: int
    prime_count: int
    targets_checked: int
    total_decompositions: int
    fewest: int
    hardest: tuple[int, ...]
    most: int
    richest_target: int
    balanced_pair: tuple[int, int] | None
    all_represented: bool
    prime_count_ok: bool
    balanced_pair_ok: bool

    @property
    def ok(self) -> bool:
        return self.all_represented and self.prime_count_ok and self.balanced_pair_ok


def sieve(limit: int) -> list[bool]:
    """Return a primality table for ``0..=limit``."""
    if limit < 1:
        raise ValueError(f"sieve limit must be at least 1, got {limit}")
    is_prime = [True] * (limit + 1)
    is_prime[0] = is_prime[1] = False
    for p in range(2, math.isqrt(limit) + 1):
        if is_prime[p]:
            multiples = range(p * p, limit + 1, p)
            is_prime[p * p :: p] = [False] * len(multiples)
    return is_prime


def goldbach_pairs(target: int, primes: list[int], is_prime: list[bool]) -> int:
    """Count unordered prime pairs p <= q with p + q == target."""
    half = target // 2
    return sum(1 for p in takewhile(lambda p: p <= half, primes) if is_prime[target - p])


def evaluate(limit: int = LIMIT) -> GoldbachReport:
    """Check every even target from 4 through ``limit``."""
    if limit < 4:
        raise ValueError(f"limit must be at least 4, got {limit}")
    is_prime = sieve(limit)
    primes = [n for n, flag in enumerate(is_prime) if flag]

    counts = {t: goldbach_pairs(t, primes, is_prime) for t in range(4, limit + 1, 2)}
    fewest = min(counts.values())
    most = max(counts.values())
    hardest = tuple(t for t, c in counts.items() if c == fewest)
    richest_target = next(t for t, c in counts.items() if c == most)

    best: tuple[int, int] | None = None
    for p in takewhile(lambda p: p <= limit // 2, primes):
        q = limit - p
        if is_prime[q] and q >= p and (best is None or q - p < best[1] - best[0]):
            best = (p, q)

    balanced_ok = (
        best is not None
        and best[0] + best[1] == limit
        and is_prime[best[0]]
        and is_prime[best[1]]
    )

    return GoldbachReport(
        limit=limit,
        prime_count=len(primes),
        targets_checked=len(counts),
        total_decompositions=sum(counts.values()),
        fewest=fewest,
        hardest=hardest,
        most=most,
        richest_target=richest_target,
        balanced_pair=best,
        all_represented=all(counts.values()),
        prime_count_ok=len(primes) == KNOWN_PRIME_COUNT,
        balanced_pair_ok=balanced_ok,
    )


def render(report: GoldbachReport) -> str:
    """Format the report as the three-section text summary."""
    limit = report.limit
    pair = report.balanced_pair
    pair_text = f"{pair[0]} + {pair[1]}" if pair else "none"
    lines = [
        "=== Answer ===",
        f"Every even integer from 4 through {limit} has at least one Goldbach "
        "decomposition in the tested range.",
        "",
        "=== Reason Why ===",
        "The program builds a prime table, enumerates unordered pairs p+q=n for each "
        "even target, and summarizes sparse and rich cases.",
        f"even targets checked : {report.targets_checked}",
        f"total decompositions : {report.total_decompositions}",
        f"fewest decompositions: {report.fewest}",
        f"hardest targets      : {', '.join(str(t) for t in report.hardest)}",
        f"most decompositions  : {report.most}",
        f"richest target       : {report.richest_target}",
        f"balanced pair({limit})  : {pair_text}",
        "",
        "=== Check ===",
        f"all represented      : {_YES_NO[bool(report.all_represented)]}",
        f"prime count known    : {_YES_NO[bool(report.prime_count_ok)]}",
        f"balanced pair valid  : {_YES_NO[bool(report.balanced_pair_ok)]}",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check Goldbach decompositions.")
    parser.add_argument("--limit", type=int, default=LIMIT)
    args = parser.parse_args(argv)
    report = evaluate(args.limit)
    print(render(report), end="")
    return 0 if report.ok else 1