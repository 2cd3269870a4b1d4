"""FastAPI dependency injection utilities."""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.core.config import settings
from app.scoring.cutoffs import ASQ3_CUTOFF_TABLE, CutoffTable
from app.scoring.loader import load_cutoff_table

logger = logging.getLogger(__name__)


@lru_cache
def get_cutoff_table() -> CutoffTable:
    """Get the threshold snapshot used for scoring.

    Loads the configured YAML table once; falls back to the built-in
    ASQ-3 table when no file is configured.

    Raises:
        FileNotFoundError: If the configured file doesn't exist
        CutoffTableError: If the configured table is invalid
    """
    if not settings.asq_cutoff_table_file:
        return ASQ3_CUTOFF_TABLE

    table = load_cutoff_table(
        settings.asq_cutoff_table_file,
        settings.asq_cutoff_tables_dir,
    )
    logger.info(f"Using cutoff table {settings.asq_cutoff_table_file}")
    return table


CutoffTableDep = Annotated[CutoffTable, Depends(get_cutoff_table)]
