import pytest

from checkedcases.deep_taxonomy import Fact, Kind, derive, main, render


@pytest.mark.parametrize("max_n", [0, 1, 5, 37])
def test_small_ladders_match_count_formula(max_n):
    report = derive(max_n)
    assert report.type_facts == 3 * max_n + 2
    assert report.derived_facts == report.type_facts + 1
    assert report.rule_count == max_n + 2
    assert report.ok


def test_full_ladder():
    report = derive()
    assert report.max_n == 100000
    assert report.rule_count == 100002
    assert report.type_facts == 3 * 100000 + 2
    assert report.goal_reached and report.n_max_seen and report.a2_derived
    assert report.count_ok


def test_negative_depth_rejected():
    with pytest.raises(ValueError):
        derive(-1)


def test_facts_are_value_objects():
    assert Fact(Kind.N, 4) == Fact(Kind.N, 4)
    assert len({Fact(Kind.I, 1), Fact(Kind.I, 1), Fact(Kind.J, 1)}) == 2
    assert Fact(Kind.A2).index == 0


def test_render_reports_counts():
    report = derive(10)
    text = render(report)
    assert f"type facts    : {report.type_facts}" in text
    assert "goal reached  : yes" in text
    assert "N(10) seen: yes" in text


def test_main_returns_zero(capsys):
    assert main(["--max-n", "20"]) == 0
    assert "count formula : yes" in capsys.readouterr().out