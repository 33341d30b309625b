"""Wright's coefficient of inbreeding by path counting.

For a hypothetical offspring of ``sire`` x ``dam``::

    F = sum over common ancestors A, over every (n1, n2) in N1(A) x N2(A), of 0.5 ** (n1 + n2 + 1)

where N1/N2 list the generation depths of every path from sire/dam to A. A
candidate counts as its own ancestor at depth 0, which is what makes
parent x offspring come out at 0.25. Ancestors deeper than ``max_depth`` are
not seen, so F is understated for pedigrees deeper than the cap.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from app.core.config import settings
from app.core.errors import InvalidArgumentError
from app.models.genealogy import RiskLevel, SiblingKind
from app.services.ancestry_service import ancestor_depths
from app.services.sibling_service import sibling_kind
from app.services.snapshot import Snapshot

logger = logging.getLogger(__name__)

INBREEDING_MAX_DEPTH = settings.INBREEDING_MAX_DEPTH
PRECISION = 4

# Risk bands used by the pairing screens
LOW_RISK_BELOW = 0.0625
MODERATE_RISK_BELOW = 0.125


@dataclass
class CommonAncestor:
    individual_id: int
    sire_depths: list[int]
    dam_depths: list[int]
    contribution: float


@dataclass
class InbreedingReport:
    sire_id: int
    dam_id: int
    coefficient: float
    common_ancestors: list[CommonAncestor] = field(default_factory=list)

    @property
    def percent(self) -> float:
        return round(self.coefficient * 100, 1)

    @property
    def risk(self) -> RiskLevel:
        return classify_risk(self.coefficient)


@dataclass
class PairingCheck:
    report: InbreedingReport
    sibling_type: SiblingKind | None


def classify_risk(coefficient: float) -> RiskLevel:
    if coefficient <= 0:
        return "none"
    if coefficient < LOW_RISK_BELOW:
        return "low"
    if coefficient < MODERATE_RISK_BELOW:
        return "moderate"
    return "high"


def inbreeding_report(snapshot: Snapshot, sire_id: int, dam_id: int,
                      max_depth: int = INBREEDING_MAX_DEPTH) -> InbreedingReport:
    if sire_id == dam_id:
        raise InvalidArgumentError("An individual cannot be paired with itself")
    # An unknown candidate simply has no ancestors, giving F = 0
    sire_side = ancestor_depths(snapshot, sire_id, max_depth)
    dam_side = ancestor_depths(snapshot, dam_id, max_depth)

    total = 0.0
    common: list[CommonAncestor] = []
    for ancestor_id in sorted(sire_side.keys() & dam_side.keys()):
        n1s, n2s = sire_side[ancestor_id], dam_side[ancestor_id]
        contribution = sum(0.5 ** (n1 + n2 + 1) for n1 in n1s for n2 in n2s)
        total += contribution
        common.append(CommonAncestor(ancestor_id, sorted(n1s), sorted(n2s), round(contribution, PRECISION)))
    common.sort(key=lambda c: (-c.contribution, c.individual_id))

    coefficient = round(min(max(total, 0.0), 1.0), PRECISION)
    logger.debug("F(%s x %s) = %s over %d common ancestors", sire_id, dam_id, coefficient, len(common))
    return InbreedingReport(sire_id, dam_id, coefficient, common)


def inbreeding_coefficient(snapshot: Snapshot, sire_id: int, dam_id: int,
                           max_depth: int = INBREEDING_MAX_DEPTH) -> float:
    return inbreeding_report(snapshot, sire_id, dam_id, max_depth).coefficient


def pairing_check(snapshot: Snapshot, male_id: int, female_id: int) -> PairingCheck:
    """Live compatibility signal for a proposed pair: coefficient plus direct sibling status."""
    report = inbreeding_report(snapshot, male_id, female_id)
    return PairingCheck(report, sibling_kind(snapshot, male_id, female_id))
