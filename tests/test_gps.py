import dataclasses

import pytest

from checkedcases.gps import (
    DESCRIPTIONS,
    GOAL,
    Action,
    City,
    Constraints,
    Description,
    Route,
    evaluate,
    format_decimal,
    infer_goal_routes,
    main,
    multiply_ppm,
    render,
    route_matches_descriptions,
    route_satisfies,
)


def test_evaluate_finds_two_valid_routes():
    report = evaluate()
    assert len(report.routes) == 2
    assert report.all_satisfy_constraints
    assert report.all_hit_goal_endpoints
    assert report.all_metrics_recompute
    assert report.ok


def test_routes_sorted_shortest_first():
    routes = infer_goal_routes(DESCRIPTIONS, GOAL)
    assert routes[0].actions == (Action.DRIVE_GENT_BRUGGE, Action.DRIVE_BRUGGE_OOSTENDE)
    assert routes[1].actions == (
        Action.DRIVE_GENT_KORTRIJK,
        Action.DRIVE_KORTRIJK_BRUGGE,
        Action.DRIVE_BRUGGE_OOSTENDE,
    )


def test_routes_start_and_end_at_goal_cities():
    for route in infer_goal_routes(DESCRIPTIONS, GOAL):
        assert route.origin is City.GENT
        assert route.destination is City.OOSTENDE


def test_durations_add_across_legs():
    leg_durations = {d.action: d.duration_seconds for d in DESCRIPTIONS}
    for route in infer_goal_routes(DESCRIPTIONS, GOAL):
        assert route.duration_seconds == sum(leg_durations[a] for a in route.actions)


def test_multiply_ppm_identity_and_zero():
    assert multiply_ppm(960000, 1_000_000) == 960000
    assert multiply_ppm(0, 980000) == 0


def test_multiply_ppm_truncates():
    assert multiply_ppm(1, 1) == 0


def test_tampered_route_does_not_recompute():
    route = infer_goal_routes(DESCRIPTIONS, GOAL)[0]
    assert route_matches_descriptions(route, DESCRIPTIONS)
    tampered = dataclasses.replace(route, duration_seconds=route.duration_seconds + 1)
    assert not route_matches_descriptions(tampered, DESCRIPTIONS)


def test_unknown_action_from_city_fails_recompute():
    route = Route(City.OOSTENDE, City.GENT, (Action.DRIVE_GENT_BRUGGE,), 0, 0, 1_000_000, 1_000_000)
    assert not route_matches_descriptions(route, DESCRIPTIONS)


def test_tight_duration_limit_filters_longer_route():
    goal = dataclasses.replace(GOAL, max_duration_seconds=3000)
    routes = infer_goal_routes(DESCRIPTIONS, goal)
    assert len(routes) == 1
    assert all(r.duration_seconds <= 3000 for r in routes)


def test_route_satisfies_respects_belief():
    route = infer_goal_routes(DESCRIPTIONS, GOAL)[0]
    strict = dataclasses.replace(GOAL, min_belief_ppm=route.belief_ppm + 1)
    assert route_satisfies(route, GOAL)
    assert not route_satisfies(route, strict)


def test_stage_count_of_empty_route():
    route = Route(City.GENT, City.GENT, (), 0, 0, 1_000_000, 1_000_000)
    assert route.stage_count() == 0


def test_cyclic_descriptions_exhaust_buffer():
    cycle = (
        Description(City.GENT, City.BRUGGE, Action.DRIVE_GENT_BRUGGE, 1, 1, 1_000_000, 1_000_000),
        Description(City.BRUGGE, City.GENT, Action.DRIVE_BRUGGE_OOSTENDE, 1, 1, 1_000_000, 1_000_000),
    )
    with pytest.raises(RuntimeError):
        infer_goal_routes(cycle, Constraints(10**9, 10**9, 0, 0, 1))


def test_format_decimal_limits():
    assert format_decimal(5000, 1000, 1) == "5.0"
    assert format_decimal(200000, 1_000_000, 1) == "0.2"


def test_format_decimal_rejects_bad_scale():
    with pytest.raises(ValueError):
        format_decimal(1, 0, 1)


def test_render_lists_every_route():
    report = evaluate()
    text = render(report)
    assert text.startswith("=== Answer ===\n")
    assert "Route #1" in text and "Route #2" in text
    assert "expected route count (= 2)     : yes" in text
    for route in report.routes:
        for action in route.actions:
            assert action.label in text


def test_main_returns_zero(capsys):
    assert main([]) == 0
    assert "case      : gps" in capsys.readouterr().out