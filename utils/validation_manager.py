# utils/validation_manager.py
"""Validation manager for checking built grids against calendar rules."""

from datetime import datetime
from typing import Dict, List, Optional, Sequence

import pandas as pd

from .date_manager import DAYS_IN_WEEK, DateManager


class ValidationManager:
    """Manages validation of built cell grids."""

    def __init__(self):
        """Initialize validation manager with an empty result list."""
        self.validation_results: List[Dict] = []

    def validate_grid(
            self,
            cells: Sequence,
            row_length: int = DAYS_IN_WEEK,
            label: Optional[str] = None
    ) -> Dict:
        """
        Validate a cell sequence.

        Checks that the cells fill whole rows, that dated cells are in
        strictly ascending order within each month block and that every
        date is a real calendar date.

        Args:
            cells: Cells as returned by build_cells()
            row_length: Cells per row for the resolution
            label: Name to report the grid under

        Returns:
            Validation result dictionary
        """
        dated = [cell.date for cell in cells if cell.date is not None]

        complete_rows = row_length > 0 and len(cells) % row_length == 0
        dates_valid = all(
            DateManager.is_valid_date(parts.year, parts.month, parts.day)
            for parts in dated
        )
        blanks_consistent = all(cell.is_blank == (cell.date is None) for cell in cells)

        validation_result = {
            'label': label,
            'cell_count': len(cells),
            'row_count': len(cells) // row_length if row_length > 0 else 0,
            'dated_count': len(dated),
            'complete_rows': complete_rows,
            'chronological': self._is_chronological(dated),
            'dates_valid': dates_valid,
            'blanks_consistent': blanks_consistent,
            'validation_time': datetime.now().isoformat(),
        }
        validation_result['validation_passed'] = all(
            validation_result[key]
            for key in ('complete_rows', 'chronological', 'dates_valid', 'blanks_consistent')
        )

        self.validation_results.append(validation_result)
        return validation_result

    @staticmethod
    def _is_chronological(dated: List) -> bool:
        # With day overflow, consecutive month blocks repeat boundary days:
        # a block may open one month before the month the previous block
        # closed in.
        for previous, current in zip(dated, dated[1:]):
            if current > previous:
                continue
            if DateManager.next_month(current.year, current.month) != (previous.year, previous.month):
                return False
        return True

    def summary(self) -> pd.DataFrame:
        """Return accumulated validation results as a DataFrame."""
        return pd.DataFrame(self.validation_results)

    def failed(self) -> List[Dict]:
        """Return results that did not pass."""
        return [r for r in self.validation_results if not r['validation_passed']]

    def clear(self):
        """Clear validation results."""
        self.validation_results.clear()
