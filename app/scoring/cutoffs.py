"""ASQ-3 threshold classification.

Each (interval, domain) has a cutoff and a monitoring threshold that split
the score axis into three bands:
- score <= cutoff: needs intervention
- cutoff < score <= monitoring: needs monitoring
- score > monitoring: on track

Intervals without a curated row are classified against a flat default row
(cutoff 20, monitoring 30). Callers that care about this approximation can
check ``CutoffTable.is_curated`` before scoring.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from app.scoring.models import DevelopmentStatus, Domain, ThresholdPair

CutoffRow = Mapping[Domain, ThresholdPair]


@dataclass(frozen=True)
class CutoffTable:
    """Read-only snapshot of cutoff/monitoring thresholds."""

    rows: Mapping[int, CutoffRow]
    default: CutoffRow
    version: str = "builtin"
    content_hash: Optional[str] = None

    @classmethod
    def build(
        cls,
        rows: Mapping[int, Mapping[Domain, ThresholdPair]],
        default: Mapping[Domain, ThresholdPair],
        version: str = "builtin",
        content_hash: Optional[str] = None,
    ) -> "CutoffTable":
        """Create a table, freezing the nested mappings."""
        frozen_rows = {
            int(interval): MappingProxyType(dict(row))
            for interval, row in rows.items()
        }
        return cls(
            rows=MappingProxyType(frozen_rows),
            default=MappingProxyType(dict(default)),
            version=version,
            content_hash=content_hash,
        )

    def is_curated(self, interval: int) -> bool:
        """Check whether the interval has its own threshold row."""
        return interval in self.rows

    @property
    def curated_intervals(self) -> list[int]:
        """Intervals with a curated row, ascending."""
        return sorted(self.rows)

    def row_for(self, interval: int) -> CutoffRow:
        """Get the threshold row used for an interval."""
        return self.rows.get(interval, self.default)


def _row(*pairs: tuple[float, float]) -> dict[Domain, ThresholdPair]:
    """Build a row from (cutoff, monitoring) pairs in canonical domain order."""
    return {
        domain: ThresholdPair(cutoff=cutoff, monitoring=monitoring)
        for domain, (cutoff, monitoring) in zip(Domain, pairs)
    }


# Columns: Communication, Gross Motor, Fine Motor, Problem Solving, Personal-Social
ASQ3_CUTOFF_TABLE = CutoffTable.build(
    rows={
        2: _row((15.31, 24.96), (22.45, 33.89), (16.30, 27.93), (21.29, 31.75), (17.87, 28.59)),
        4: _row((17.01, 27.68), (19.04, 33.02), (20.24, 33.15), (23.29, 35.13), (20.00, 32.55)),
        6: _row((13.52, 26.19), (7.13, 24.47), (18.88, 32.00), (21.09, 34.05), (16.47, 29.44)),
        8: _row((17.12, 30.17), (17.53, 33.81), (24.04, 38.01), (25.66, 38.33), (20.06, 33.36)),
    },
    default=_row(*[(20, 30)] * len(Domain)),
)


def get_cutoff_score(
    interval: int,
    domain: Domain,
    table: Optional[CutoffTable] = None,
) -> ThresholdPair:
    """Get cutoff and monitoring thresholds for an interval and domain.

    Args:
        interval: ASQ interval in months
        domain: Developmental domain
        table: Threshold snapshot (defaults to the built-in ASQ-3 table)

    Returns:
        ThresholdPair from the interval's row, or from the default row
    """
    table = table or ASQ3_CUTOFF_TABLE
    return table.row_for(interval)[Domain(domain)]


def needs_intervention(
    score: float,
    interval: int,
    domain: Domain,
    table: Optional[CutoffTable] = None,
) -> bool:
    """Check if a score is at or below the cutoff."""
    return score <= get_cutoff_score(interval, domain, table).cutoff


def needs_monitoring(
    score: float,
    interval: int,
    domain: Domain,
    table: Optional[CutoffTable] = None,
) -> bool:
    """Check if a score is above the cutoff but at or below monitoring."""
    thresholds = get_cutoff_score(interval, domain, table)
    return thresholds.cutoff < score <= thresholds.monitoring


def get_development_status(
    score: float,
    interval: int,
    domain: Domain,
    table: Optional[CutoffTable] = None,
) -> DevelopmentStatus:
    """Classify a domain score."""
    if needs_intervention(score, interval, domain, table):
        return DevelopmentStatus.NEEDS_INTERVENTION
    if needs_monitoring(score, interval, domain, table):
        return DevelopmentStatus.NEEDS_MONITORING
    return DevelopmentStatus.ON_TRACK


def validate_cutoff_table(table: CutoffTable) -> list[str]:
    """Find rows where the cutoff is not below the monitoring threshold.

    Returns:
        Human-readable violations (empty when the table is consistent)
    """
    violations = []
    labelled_rows = [(str(i), table.rows[i]) for i in table.curated_intervals]
    labelled_rows.append(("default", table.default))

    for label, row in labelled_rows:
        for domain in Domain:
            pair = row.get(domain)
            if pair is None:
                violations.append(f"{label}/{domain.value}: missing thresholds")
            elif pair.cutoff >= pair.monitoring:
                violations.append(
                    f"{label}/{domain.value}: cutoff {pair.cutoff} "
                    f">= monitoring {pair.monitoring}"
                )

    return violations
