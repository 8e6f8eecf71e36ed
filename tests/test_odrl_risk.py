import dataclasses

from checkedcases.odrl_risk import (
    NEEDS,
    PERMISSIONS,
    RULES,
    Action,
    ConstraintKey,
    MissingSafeguard,
    Need,
    Permission,
    RiskRule,
    evaluate,
    main,
    rank_risks,
    render,
)


def test_built_in_ranking_matches_stated_answer():
    report = evaluate()
    assert [r.clause_id for r in report.risks] == ["H1", "H2", "H3", "H4"]
    assert [r.score for r in report.risks] == [100, 100, 88, 80]
    assert report.ok


def test_scores_are_capped_raw_sums():
    needs = {n.id: n.importance for n in NEEDS}
    bases = {r.rule_id: r.base_score for r in RULES}
    for risk in rank_risks(RULES, PERMISSIONS, NEEDS):
        assert risk.score_raw == bases[risk.rule_id] + needs[risk.need_id]
        assert risk.score == min(risk.score_raw, 100)


def test_ranking_is_descending():
    risks = rank_risks(RULES, PERMISSIONS, NEEDS)
    assert all(a.score >= b.score for a, b in zip(risks, risks[1:]))


def test_risk_action_comes_from_permission():
    actions = {p.id: p.action for p in PERMISSIONS}
    for risk in rank_risks(RULES, PERMISSIONS, NEEDS):
        assert risk.action is actions[risk.permission_id]


def test_is_missing_per_safeguard():
    bare = Permission("P", "C", Action.DOWNLOAD)
    guarded = Permission(
        "P",
        "C",
        Action.DOWNLOAD,
        ((ConstraintKey.HAS_DATA_PERMIT, "yes"),),
        (Action.PROCESS_ONLY_IN_SECURE_ENVIRONMENT,),
    )
    assert bare.is_missing(MissingSafeguard.DATA_PERMIT)
    assert not guarded.is_missing(MissingSafeguard.DATA_PERMIT)
    assert bare.is_missing(MissingSafeguard.SECURE_ENV)
    assert not guarded.is_missing(MissingSafeguard.SECURE_ENV)
    assert guarded.is_missing(MissingSafeguard.OPT_OUT)


def test_safeguarded_permission_yields_no_risk():
    fixed = tuple(
        dataclasses.replace(p, constraints=p.constraints + ((ConstraintKey.HAS_DATA_PERMIT, "yes"),))
        if p.clause_id == "H1"
        else p
        for p in PERMISSIONS
    )
    risks = rank_risks(RULES, fixed, NEEDS)
    assert "H1" not in [r.clause_id for r in risks]
    assert len(risks) == len(RULES) - 1


def test_rule_with_unknown_permission_is_skipped():
    rule = dataclasses.replace(RULES[0], permission_id="NoSuchPermission")
    assert rank_risks((rule,), PERMISSIONS, NEEDS) == []


def test_rule_with_unknown_need_is_skipped():
    rule = dataclasses.replace(RULES[0], need_id="NoSuchNeed")
    assert rank_risks((rule,), PERMISSIONS, NEEDS) == []


def test_raw_score_above_cap_is_kept():
    need = Need("N", 50, "demo")
    permission = Permission("P", "Z", Action.DOWNLOAD)
    rule = RiskRule("R", "P", "Z", "N", 90, "src", "fix", MissingSafeguard.STAT_ANON)
    (risk,) = rank_risks((rule,), (permission,), (need,))
    assert risk.score_raw == 90 + 50
    assert risk.score == 100


def test_ties_break_on_clause_id():
    need = Need("N", 0, "demo")
    perms = (Permission("PB", "B", Action.DOWNLOAD), Permission("PA", "A", Action.DOWNLOAD))
    rules = (
        RiskRule("R1", "PB", "B", "N", 10, "s", "m", MissingSafeguard.OPT_OUT),
        RiskRule("R2", "PA", "A", "N", 10, "s", "m", MissingSafeguard.OPT_OUT),
    )
    assert [r.clause_id for r in rank_risks(rules, perms, (need,))] == ["A", "B"]


def test_render_shows_each_risk():
    report = evaluate()
    text = render(report)
    assert text.count("Risk #") == len(report.risks)
    assert "action        : provideSecondaryUseData" in text
    assert "risk count = 4          : yes" in text


def test_main_returns_zero(capsys):
    assert main([]) == 0
    assert "=== Check ===" in capsys.readouterr().out