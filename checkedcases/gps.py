"""Composing route descriptions into goal routes that meet travel constraints."""

from __future__ import annotations

import argparse
import enum
from collections.abc import Sequence
from dataclasses import dataclass

PPM = 1_000_000
EXPECTED_ROUTE_COUNT = 2
_MAX_KNOWN_ROUTES = 64
_MAX_GOAL_ROUTES = 16


class City(enum.IntEnum):
    GENT = 0
    BRUGGE = 1
    KORTRIJK = 2
    OOSTENDE = 3


class Action(enum.IntEnum):
    DRIVE_GENT_BRUGGE = 0
    DRIVE_GENT_KORTRIJK = 1
    DRIVE_KORTRIJK_BRUGGE = 2
    DRIVE_BRUGGE_OOSTENDE = 3

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Description:
    """A direct leg between two cities with its metrics."""

    origin: City
    destination: City
    action: Action
    duration_seconds: int
    cost_milli: int
    belief_ppm: int
    comfort_ppm: int


@dataclass(frozen=True)
class Constraints:
    """Limits that a goal route has to respect."""

    max_duration_seconds: int
    max_cost_milli: int
    min_belief_ppm: int
    min_comfort_ppm: int
    max_stages: int


@dataclass(frozen=True)
class Route:
    """A sequence of actions leading from one city to another."""

    origin: City
    destination: City
    actions: tuple[Action, ...]
    duration_seconds: int
    cost_milli: int
    belief_ppm: int
    comfort_ppm: int

    def stage_count(self) -> int:
        return 1 if self.actions else 0

    @classmethod
    def from_description(cls, d: Description) -> Route:
        return cls(
            d.origin,
            d.destination,
            (d.action,),
            d.duration_seconds,
            d.cost_milli,
            d.belief_ppm,
            d.comfort_ppm,
        )

    def prepend(self, d: Description) -> Route:
        """Return the route that drives leg ``d`` first and then follows this route."""
        return Route(
            d.origin,
            self.destination,
            (d.action, *self.actions),
            d.duration_seconds + self.duration_seconds,
            d.cost_milli + self.cost_milli,
            multiply_ppm(d.belief_ppm, self.belief_ppm),
            multiply_ppm(d.comfort_ppm, self.comfort_ppm),
        )


DESCRIPTIONS: tuple[Description, ...] = (
    Description(City.GENT, City.BRUGGE, Action.DRIVE_GENT_BRUGGE, 1500, 6, 960000, 990000),
    Description(City.GENT, City.KORTRIJK, Action.DRIVE_GENT_KORTRIJK, 1600, 7, 960000, 990000),
    Description(City.KORTRIJK, City.BRUGGE, Action.DRIVE_KORTRIJK_BRUGGE, 1600, 7, 960000, 990000),
    Description(City.BRUGGE, City.OOSTENDE, Action.DRIVE_BRUGGE_OOSTENDE, 900, 4, 980000, 1000000),
)

GOAL = Constraints(
    max_duration_seconds=5000,
    max_cost_milli=5000,
    min_belief_ppm=200000,
    min_comfort_ppm=400000,
    max_stages=1,
)
GOAL_FROM = City.GENT
GOAL_TO = City.OOSTENDE


@dataclass(frozen=True)
class GpsReport:
    routes: tuple[Route, ...]
    goal: Constraints
    all_satisfy_constraints: bool
    all_hit_goal_endpoints: bool
    all_metrics_recompute: bool

    @property
    def ok(self) -> bool:
        return (
            len(self.routes) == EXPECTED_ROUTE_COUNT
            and self.all_satisfy_constraints
            and self.all_hit_goal_endpoints
            and self.all_metrics_recompute
        )


def multiply_ppm(left: int, right: int) -> int:
    """Multiply two parts-per-million values, truncating the result."""
    return left * right // PPM


def route_satisfies(route: Route, constraints: Constraints) -> bool:
    """Check a route against every limit in ``constraints``."""
    return (
        route.duration_seconds <= constraints.max_duration_seconds
        and route.cost_milli <= constraints.max_cost_milli
        and route.belief_ppm >= constraints.min_belief_ppm
        and route.comfort_ppm >= constraints.min_comfort_ppm
        and route.stage_count() <= constraints.max_stages
    )


def route_matches_descriptions(
    route: Route, descriptions: Sequence[Description] = DESCRIPTIONS
) -> bool:
    """Replay the route's actions and check that every metric recomputes."""
    current = route.origin
    duration = cost = 0
    belief = comfort = PPM
    for action in route.actions:
        leg = next(
            (d for d in descriptions if d.origin == current and d.action == action), None
        )
        if leg is None:
            return False
        current = leg.destination
        duration += leg.duration_seconds
        cost += leg.cost_milli
        belief = multiply_ppm(belief, leg.belief_ppm)
        comfort = multiply_ppm(comfort, leg.comfort_ppm)
    return (
        current == route.destination
        and duration == route.duration_seconds
        and cost == route.cost_milli
        and belief == route.belief_ppm
        and comfort == route.comfort_ppm
    )


def infer_goal_routes(
    descriptions: Sequence[Description] = DESCRIPTIONS, goal: Constraints = GOAL
) -> list[Route]:
    """Derive all composed routes from Gent to Oostende that satisfy ``goal``."""
    known = [Route.from_description(d) for d in descriptions]
    seen = set(known)
    agenda = 0
    while agenda < len(known):
        rest = known[agenda]
        agenda += 1
        for d in descriptions:
            if d.destination != rest.origin:
                continue
            route = rest.prepend(d)
            if route in seen:
                continue
            if len(known) >= _MAX_KNOWN_ROUTES:
                raise RuntimeError("internal route buffer exhausted")
            seen.add(route)
            known.append(route)

    found = [
        r
        for r in known
        if r.origin == GOAL_FROM and r.destination == GOAL_TO and route_satisfies(r, goal)
    ]
    if len(found) > _MAX_GOAL_ROUTES:
        raise RuntimeError("output route buffer exhausted")
    return sorted(found, key=lambda r: (len(r.actions), tuple(r.actions)))


def format_decimal(value: int, scale: int, digits: int) -> str:
    """Format ``value / scale`` rounded half up to ``digits`` decimals."""
    if scale <= 0 or digits < 0:
        raise ValueError("scale must be positive and digits non-negative")
    fractional_scale = 10**digits
    rounded = (value * fractional_scale + scale // 2) // scale
    whole, fractional = divmod(rounded, fractional_scale)
    return f"{whole}.{fractional:0{digits}d}"


def evaluate() -> GpsReport:
    """Infer the goal routes and verify each of them."""
    routes = tuple(infer_goal_routes(DESCRIPTIONS, GOAL))
    return GpsReport(
        routes=routes,
        goal=GOAL,
        all_satisfy_constraints=all(route_satisfies(r, GOAL) for r in routes),
        all_hit_goal_endpoints=all(
            r.origin == GOAL_FROM and r.destination == GOAL_TO for r in routes
        ),
        all_metrics_recompute=all(route_matches_descriptions(r, DESCRIPTIONS) for r in routes),
    )


def _route_lines(index: int, route: Route, goal: Constraints) -> list[str]:
    cost = format_decimal(route.cost_milli, 1000, 3)
    cost_limit = format_decimal(goal.max_cost_milli, 1000, 1)
    belief = format_decimal(route.belief_ppm, PPM, 3)
    belief_limit = format_decimal(goal.min_belief_ppm, PPM, 1)
    comfort = format_decimal(route.comfort_ppm, PPM, 3)
    comfort_limit = format_decimal(goal.min_comfort_ppm, PPM, 1)
    lines = [
        f"Route #{index}",
        f" Steps    : {len(route.actions)}",
        f" Duration : {route.duration_seconds} s (\u2264 {goal.max_duration_seconds})",
        f" Cost     : {cost} (\u2264 {cost_limit})",
        f" Belief   : {belief} (\u2265 {belief_limit})",
        f" Comfort  : {comfort} (\u2265 {comfort_limit})",
        f" Stages   : {route.stage_count()} (\u2264 {goal.max_stages})",
    ]
    lines.extend(f"   {n}. {a.label}" for n, a in enumerate(route.actions, start=1))
    return lines


def render(report: GpsReport) -> str:
    """Format the report as the three-section text summary."""
    lines = [
        "=== Answer ===",
        "The GPS case finds all goal routes from Gent to Oostende that satisfy the "
        "route constraints.",
        "case      : gps",
        f"routes    : {len(report.routes)}",
        "",
        "=== Reason Why ===",
        "Routes are built compositionally from direct descriptions, with duration and "
        "cost added and belief and comfort combined multiplicatively.",
    ]
    for index, route in enumerate(report.routes, start=1):
        if index > 1:
            lines.append("")
        lines += _route_lines(index, route, report.goal)
    count_ok = len(report.routes) == EXPECTED_ROUTE_COUNT
    lines += [
        "",
        "=== Check ===",
        f"all routes satisfy constraints : {'yes' if report.all_satisfy_constraints else 'no'}",
        f"all routes hit goal endpoints  : {'yes' if report.all_hit_goal_endpoints else 'no'}",
        f"metrics recompute from steps   : {'yes' if report.all_metrics_recompute else 'no'}",
        f"expected route count (= 2)     : {'yes' if count_ok else 'no'}",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Find goal routes from Gent to Oostende.").parse_args(argv)
    report = evaluate()
    print(render(report), end="")
    return 0 if report.ok else 1