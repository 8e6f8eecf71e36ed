"""Forward chaining over a long implication ladder N(0) -> ... -> N(max) -> A2 -> goal."""

from __future__ import annotations

import argparse
import enum
from collections import deque
from dataclasses import dataclass

MAX_N = 100_000

_YES_NO = {True: "yes", False: "no"}


class Kind(enum.Enum):
    N = "N"
    I = "I"  # noqa: E741
    J = "J"
    A2 = "A2"


@dataclass(frozen=True, slots=True)
class Fact:
    """A typed fact such as N(3) or A2."""

    kind: Kind
    index: int = 0


@dataclass(frozen=True)
class TaxonomyReport:
    """Outcome of running the ladder to its end."""

    max_n: int
    rule_count: int
    type_facts: int
    derived_facts: int
    goal_reached: bool
    n_max_seen: bool
    a2_derived: bool

    @property
    def expected_type_facts(self) -> int:
        return 3 * self.max_n + 2

    @property
    def count_ok(self) -> bool:
        return (
            self.type_facts == self.expected_type_facts
            and self.derived_facts == self.expected_type_facts + 1
        )

    @property
    def ok(self) -> bool:
        return self.goal_reached and self.n_max_seen and self.a2_derived and self.count_ok


def derive(max_n: int = MAX_N) -> TaxonomyReport:
    """Derive every fact reachable from N(0) breadth first."""
    if max_n < 0:
        raise ValueError(f"max_n must be non-negative, got {max_n}")
    seen: set[Fact] = set()
    queue: deque[Fact] = deque()

    def enqueue(fact: Fact) -> None:
        if fact not in seen:
            seen.add(fact)
            queue.append(fact)

    enqueue(Fact(Kind.N, 0))
    goal_reached = False
    while queue:
        current = queue.popleft()
        if current.kind is Kind.N and current.index < max_n:
            following = current.index + 1
            enqueue(Fact(Kind.N, following))
            enqueue(Fact(Kind.I, following))
            enqueue(Fact(Kind.J, following))
        elif current.kind is Kind.N and current.index == max_n:
            enqueue(Fact(Kind.A2))
        elif current.kind is Kind.A2:
            goal_reached = True

    type_facts = len(seen)
    return TaxonomyReport(
        max_n=max_n,
        rule_count=max_n + 2,
        type_facts=type_facts,
        derived_facts=type_facts + (1 if goal_reached else 0),
        goal_reached=goal_reached,
        n_max_seen=Fact(Kind.N, max_n) in seen,
        a2_derived=Fact(Kind.A2) in seen,
    )


def render(report: TaxonomyReport) -> str:
    """Format the report as the three-section text summary."""
    m = report.max_n
    lines = [
        "=== Answer ===",
        "The deep taxonomy chain reaches the goal from the seed fact after deriving "
        f"the full class ladder up to N({m}).",
        "",
        "=== Reason Why ===",
        f"Starting from Ind:N(0), each N(i) derives N(i+1), I(i+1), and J(i+1); N({m}) "
        "then derives A2 and the goal.",
        "seed facts    : 1",
        f"rules         : {report.rule_count}",
        f"derived facts : {report.derived_facts}",
        f"type facts    : {report.type_facts}",
        "",
        "=== Check ===",
        f"goal reached  : {_YES_NO[report.goal_reached]}",
        f"N({m}) seen: {_YES_NO[report.n_max_seen]}",
        f"A2 derived    : {_YES_NO[report.a2_derived]}",
        f"count formula : {_YES_NO[report.count_ok]}",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the deep taxonomy chain.")
    parser.add_argument("--max-n", type=int, default=MAX_N)
    args = parser.parse_args(argv)
    report = derive(args.max_n)
    print(render(report), end="")
    return 0 if report.ok else 1