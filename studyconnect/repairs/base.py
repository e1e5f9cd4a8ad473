"""
Batch Corrections

FLOW OVERVIEW
- A BatchCorrection selects candidate rows with `predicate()` and fixes them one
  at a time with `correct(connection, row)`.
- Each row is corrected in its own transaction (a savepoint when the caller
  already holds one). A row that fails is logged, counted and skipped; the job
  never raises for a single row.
- Corrected rows no longer match the predicate, so running a job again only
  picks up what is left.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from sqlalchemy import select
from sqlalchemy.engine import Connection

logger = logging.getLogger(__name__)


@dataclass
class CorrectionReport:
    """Outcome of one run of a correction job"""
    name: str
    examined: int = 0
    corrected: int = 0
    failed: int = 0
    failed_ids: List[str] = field(default_factory=list)


class BatchCorrection:
    """Base class for one-shot data repairs"""

    name = 'batch-correction'
    table = None

    def predicate(self):
        """WHERE clause selecting rows that still need the correction"""
        raise NotImplementedError

    def correct(self, connection, row):
        """Fix one row; runs inside that row's transaction"""
        raise NotImplementedError

    def candidates(self, connection):
        return connection.execute(select(self.table).where(self.predicate())).mappings().all()

    def run(self, bind):
        """
        Apply the correction to every matching row.

        Args:
            bind: Engine (one transaction per row) or Connection (one savepoint
                per row, the caller commits)

        Returns:
            CorrectionReport
        """
        report = CorrectionReport(name=self.name)
        if isinstance(bind, Connection):
            rows = self.candidates(bind)
        else:
            with bind.connect() as connection:
                rows = self.candidates(connection)
        logger.info('%s: %d rows need correction', self.name, len(rows))

        for row in rows:
            report.examined += 1
            try:
                self._correct_row(bind, row)
            except Exception:
                logger.exception('%s: failed to correct %s', self.name, row['id'])
                report.failed += 1
                report.failed_ids.append(str(row['id']))
            else:
                report.corrected += 1

        logger.info(
            '%s: examined %d, corrected %d, failed %d',
            self.name, report.examined, report.corrected, report.failed
        )
        return report

    def _correct_row(self, bind, row):
        if isinstance(bind, Connection):
            with bind.begin_nested() if bind.in_transaction() else bind.begin():
                self.correct(bind, row)
        else:
            with bind.begin() as connection:
                self.correct(connection, row)
