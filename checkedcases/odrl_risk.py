"""Risk ranking for permissions of a secondary-use health data agreement."""

from __future__ import annotations

import argparse
import enum
from collections.abc import Sequence
from dataclasses import dataclass

MAX_SCORE = 100
EXPECTED_RISK_COUNT = 4


class Action(enum.Enum):
    PROVIDE_SECONDARY_USE_DATA = "provideSecondaryUseData"
    DOWNLOAD = "download"
    REMOVE_DIRECT_IDENTIFIERS = "removeDirectIdentifiers"
    PROCESS_ONLY_IN_SECURE_ENVIRONMENT = "processOnlyInSecureEnvironment"


class ConstraintKey(enum.Enum):
    PURPOSE = "purpose"
    HAS_DATA_PERMIT = "hasDataPermit"
    RESPECT_OPT_OUT_SECONDARY_USE = "respectOptOutSecondaryUse"
    STATISTICALLY_ANONYMISED = "statisticallyAnonymised"


class MissingSafeguard(enum.Enum):
    DATA_PERMIT = "data permit"
    OPT_OUT = "opt-out"
    SECURE_ENV = "secure environment"
    STAT_ANON = "statistical anonymisation"


@dataclass(frozen=True)
class Need:
    id: str
    importance: int
    description: str


@dataclass(frozen=True)
class Permission:
    """A permitted action with its constraints and duties."""

    id: str
    clause_id: str
    action: Action
    constraints: tuple[tuple[ConstraintKey, str], ...] = ()
    duties: tuple[Action, ...] = ()

    def has_constraint(self, key: ConstraintKey) -> bool:
        return any(k is key for k, _ in self.constraints)

    def has_duty(self, action: Action) -> bool:
        return action in self.duties

    def is_missing(self, safeguard: MissingSafeguard) -> bool:
        """Return whether this permission lacks ``safeguard``."""
        if safeguard is MissingSafeguard.DATA_PERMIT:
            return not self.has_constraint(ConstraintKey.HAS_DATA_PERMIT)
        if safeguard is MissingSafeguard.OPT_OUT:
            return not self.has_constraint(ConstraintKey.RESPECT_OPT_OUT_SECONDARY_USE)
        if safeguard is MissingSafeguard.SECURE_ENV:
            return not self.has_duty(Action.PROCESS_ONLY_IN_SECURE_ENVIRONMENT)
        return not self.has_constraint(ConstraintKey.STATISTICALLY_ANONYMISED)


@dataclass(frozen=True)
class RiskRule:
    rule_id: str
    permission_id: str
    clause_id: str
    need_id: str
    base_score: int
    risk_source: str
    mitigation: str
    missing: MissingSafeguard


@dataclass(frozen=True)
class RankedRisk:
    rule_id: str
    clause_id: str
    permission_id: str
    need_id: str
    action: Action
    need_importance: int
    score_raw: int
    score: int
    risk_source: str
    mitigation: str


NEEDS: tuple[Need, ...] = (
    Need("Need_RequireDataPermit", 20,
         "Secondary use should be authorised via an EHDS Data Permit."),
    Need("Need_RespectOptOutSecondaryUse", 25,
         "Respect the EHDS right to opt out from secondary use."),
    Need("Need_SecureProcessingEnvironment", 18,
         "Secondary-use processing must occur within a secure processing environment."),
    Need("Need_StatisticallyAnonymisedSecondaryUse", 15,
         "Secondary use should use statistically anonymised data."),
)

PERMISSIONS: tuple[Permission, ...] = (
    Permission("PermSecondaryUseDUA", "H1", Action.PROVIDE_SECONDARY_USE_DATA,
               ((ConstraintKey.PURPOSE, "HealthcareScientificResearch"),)),
    Permission("PermSecondaryUseAllPatients", "H2", Action.PROVIDE_SECONDARY_USE_DATA,
               ((ConstraintKey.PURPOSE, "TrainTestAndEvaluateHealthAlgorithms"),)),
    Permission("PermDownloadLocalCopy", "H3", Action.DOWNLOAD),
    Permission("PermProvidePseudonymisedData", "H4", Action.PROVIDE_SECONDARY_USE_DATA,
               duties=(Action.REMOVE_DIRECT_IDENTIFIERS,)),
)

RULES: tuple[RiskRule, ...] = (
    RiskRule("R1", "PermSecondaryUseDUA", "H1", "Need_RequireDataPermit", 80,
             "Secondary use permitted without EHDS Data Permit.",
             "Require an EHDS Data Permit before secondary use.",
             MissingSafeguard.DATA_PERMIT),
    RiskRule("R2", "PermSecondaryUseAllPatients", "H2", "Need_RespectOptOutSecondaryUse", 75,
             "Opt-out from secondary use not explicitly respected.",
             "Exclude records of persons who exercised the EHDS opt-out.",
             MissingSafeguard.OPT_OUT),
    RiskRule("R3", "PermDownloadLocalCopy", "H3", "Need_SecureProcessingEnvironment", 70,
             "Local download permitted; secure processing environment not required.",
             "Require processing only within a secure processing environment.",
             MissingSafeguard.SECURE_ENV),
    RiskRule("R4", "PermProvidePseudonymisedData", "H4",
             "Need_StatisticallyAnonymisedSecondaryUse", 65,
             "Statistical anonymisation safeguard missing for secondary use.",
             "Require statistically anonymised data for secondary use.",
             MissingSafeguard.STAT_ANON),
)


@dataclass(frozen=True)
class RiskReport:
    risks: tuple[RankedRisk, ...]
    score_formula_ok: bool
    sorted_ok: bool
    top_pair_ok: bool
    mitigations_ok: bool

    @property
    def ok(self) -> bool:
        return (
            len(self.risks) == EXPECTED_RISK_COUNT
            and self.score_formula_ok
            and self.sorted_ok
            and self.top_pair_ok
            and self.mitigations_ok
        )


def _capped(raw: int) -> int:
    return min(raw, MAX_SCORE)


def rank_risks(
    rules: Sequence[RiskRule] = RULES,
    permissions: Sequence[Permission] = PERMISSIONS,
    needs: Sequence[Need] = NEEDS,
) -> list[RankedRisk]:
    """Emit a risk for each rule whose permission lacks the safeguard, highest score first."""
    perms = {p.id: p for p in permissions}
    need_by_id = {n.id: n for n in needs}
    risks = []
    for rule in rules:
        permission = perms.get(rule.permission_id)
        need = need_by_id.get(rule.need_id)
        if permission is None or need is None or not permission.is_missing(rule.missing):
            continue
        raw = rule.base_score + need.importance
        risks.append(
            RankedRisk(
                rule_id=rule.rule_id,
                clause_id=rule.clause_id,
                permission_id=rule.permission_id,
                need_id=rule.need_id,
                action=permission.action,
                need_importance=need.importance,
                score_raw=raw,
                score=_capped(raw),
                risk_source=rule.risk_source,
                mitigation=rule.mitigation,
            )
        )
    return sorted(risks, key=lambda r: (-r.score, r.clause_id))


def evaluate() -> RiskReport:
    """Rank the built-in agreement's risks and check the ranking."""
    risks = tuple(rank_risks(RULES, PERMISSIONS, NEEDS))
    rule_by_id = {r.rule_id: r for r in RULES}
    need_by_id = {n.id: n for n in NEEDS}

    def recomputed(risk: RankedRisk) -> int:
        rule = rule_by_id[risk.rule_id]
        return _capped(rule.base_score + need_by_id[rule.need_id].importance)

    return RiskReport(
        risks=risks,
        score_formula_ok=all(r.score == recomputed(r) for r in risks),
        sorted_ok=all(a.score >= b.score for a, b in zip(risks, risks[1:])),
        top_pair_ok=len(risks) >= 2
        and risks[0].clause_id == "H1"
        and risks[0].score == MAX_SCORE
        and risks[1].clause_id == "H2"
        and risks[1].score == MAX_SCORE,
        mitigations_ok=all(r.mitigation for r in risks),
    )


def _yes(flag: bool) -> str:
    return "yes" if flag else "no"


def render(report: RiskReport) -> str:
    """Format the report as the three-section text summary."""
    lines = [
        "=== Answer ===",
        "The EHDS secondary-use agreement yields four ranked risks; H1 and H2 normalize "
        "to score 100, followed by H3 at 88 and H4 at 80.",
        "",
        "=== Reason Why ===",
        "The agreement instantiates concrete clauses, permissions, patient needs, and "
        "rule applications. A risk appears when a permission is missing a required safeguard.",
    ]
    for number, risk in enumerate(report.risks, start=1):
        lines += [
            f"Risk #{number}",
            f"  clause        : {risk.clause_id}",
            f"  permission    : {risk.permission_id}",
            f"  action        : {risk.action.value}",
            f"  violated need : {risk.need_id}",
            f"  score raw     : {risk.score_raw}",
            f"  score         : {risk.score}",
            f"  source        : {risk.risk_source}",
            f"  mitigation    : {risk.mitigation}",
        ]
    lines += [
        "",
        "=== Check ===",
        f"risk count = 4          : {_yes(len(report.risks) == EXPECTED_RISK_COUNT)}",
        f"score formula recomputes: {_yes(report.score_formula_ok)}",
        f"ranking sorted desc     : {_yes(report.sorted_ok)}",
        f"expected top pair       : {_yes(report.top_pair_ok)}",
        f"every risk has mitigation: {_yes(report.mitigations_ok)}",
    ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Rank agreement risks.").parse_args(argv)
    report = evaluate()
    print(render(report), end="")
    return 0 if report.ok else 1