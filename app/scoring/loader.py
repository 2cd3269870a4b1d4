"""YAML cutoff table loader with integrity hashing."""

import hashlib
import logging
from pathlib import Path
from typing import Any

import yaml

from app.scoring.cutoffs import CutoffTable, validate_cutoff_table
from app.scoring.models import ASQ_INTERVALS, Domain, ThresholdPair

logger = logging.getLogger(__name__)

# Default cutoff tables directory
CUTOFF_TABLES_DIR = Path(__file__).parent.parent.parent / "cutoff_tables"


class CutoffTableError(ValueError):
    """Raised when a cutoff table file is structurally invalid."""


def compute_table_hash(content: str) -> str:
    """Compute SHA256 hash of cutoff table content.

    Args:
        content: Raw YAML content string

    Returns:
        SHA256 hex digest
    """
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def _parse_row(label: str, data: Any) -> dict[Domain, ThresholdPair]:
    if not isinstance(data, dict):
        raise CutoffTableError(f"Row {label} must be a mapping of domains")

    row = {}
    for key, pair in data.items():
        try:
            domain = Domain(key)
        except ValueError:
            raise CutoffTableError(f"Row {label}: unknown domain {key!r}") from None

        if not isinstance(pair, dict) or "cutoff" not in pair or "monitoring" not in pair:
            raise CutoffTableError(
                f"Row {label}/{domain.value}: expected cutoff and monitoring"
            )
        try:
            row[domain] = ThresholdPair(
                cutoff=float(pair["cutoff"]),
                monitoring=float(pair["monitoring"]),
            )
        except (TypeError, ValueError):
            raise CutoffTableError(
                f"Row {label}/{domain.value}: thresholds must be numeric"
            ) from None

    missing = [d.value for d in Domain if d not in row]
    if missing:
        raise CutoffTableError(f"Row {label}: missing domains {', '.join(missing)}")

    return row


def parse_cutoff_table(data: dict[str, Any], content_hash: str | None = None) -> CutoffTable:
    """Build a CutoffTable from its parsed YAML representation.

    Raises:
        CutoffTableError: If the structure is invalid or any cutoff is not
                          below its monitoring threshold
    """
    if not isinstance(data, dict):
        raise CutoffTableError("Cutoff table must be a mapping")
    if "default" not in data:
        raise CutoffTableError("Cutoff table has no default row")

    rows = {}
    for key, row_data in (data.get("intervals") or {}).items():
        try:
            interval = int(key)
        except (TypeError, ValueError):
            raise CutoffTableError(f"Invalid interval {key!r}") from None
        if interval not in ASQ_INTERVALS:
            raise CutoffTableError(f"Interval {interval} is not an ASQ-3 interval")
        rows[interval] = _parse_row(str(interval), row_data)

    table = CutoffTable.build(
        rows=rows,
        default=_parse_row("default", data["default"]),
        version=str(data.get("version", "unknown")),
        content_hash=content_hash,
    )

    violations = validate_cutoff_table(table)
    if violations:
        raise CutoffTableError("; ".join(violations))

    return table


def load_cutoff_table(
    filename: str,
    tables_dir: Path | None = None,
) -> CutoffTable:
    """Load a cutoff table YAML file.

    Args:
        filename: Name of the table file (e.g., "asq3-cutoffs-v1.0.0.yaml")
        tables_dir: Directory containing tables (defaults to /cutoff_tables)

    Returns:
        Validated CutoffTable carrying the file's SHA256 hash

    Raises:
        FileNotFoundError: If the file doesn't exist
        CutoffTableError: If the table or its YAML is invalid
    """
    if tables_dir is None:
        tables_dir = CUTOFF_TABLES_DIR

    filepath = tables_dir / filename

    if not filepath.exists():
        raise FileNotFoundError(f"Cutoff table not found: {filepath}")

    content = filepath.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise CutoffTableError(f"Malformed YAML in {filename}: {exc}") from exc

    table = parse_cutoff_table(data, compute_table_hash(content))

    logger.info(
        f"Loaded cutoff table {filename} (version={table.version}, "
        f"curated={table.curated_intervals})"
    )
    return table


class CutoffTableLoader:
    """Stateful cutoff table loader with caching."""

    def __init__(self, tables_dir: Path | None = None) -> None:
        self.tables_dir = tables_dir or CUTOFF_TABLES_DIR
        self._cache: dict[str, CutoffTable] = {}

    def load(self, filename: str, use_cache: bool = True) -> CutoffTable:
        """Load a table with optional caching."""
        if use_cache and filename in self._cache:
            return self._cache[filename]

        table = load_cutoff_table(filename, self.tables_dir)
        self._cache[filename] = table
        return table

    def clear_cache(self) -> None:
        """Clear the table cache."""
        self._cache.clear()

    def list_tables(self) -> list[str]:
        """List available table files."""
        return sorted(f.name for f in self.tables_dir.glob("*.yaml"))
