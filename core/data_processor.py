# core/data_processor.py
"""Grid processing and conversion utilities."""

from typing import List, Sequence

import numpy as np
import pandas as pd

from utils.date_manager import DAYS_IN_WEEK

from .types import Cell

GRID_COLUMNS = [
    'position',
    'row',
    'column',
    'year',
    'month',
    'day',
    'date',
    'belongs_to_requested_period',
    'is_blank',
    'is_current_date',
]


class GridProcessor:
    """Handles Cell sequence to row and DataFrame conversion."""

    @staticmethod
    def to_rows(cells: Sequence[Cell], row_length: int = DAYS_IN_WEEK) -> List[List[Cell]]:
        """
        Group a flat cell sequence into display rows.

        Args:
            cells: Cells as returned by build_cells()
            row_length: Cells per row (resolution.row_length)

        Returns:
            List of rows, each a list of row_length cells

        Raises:
            ValueError: If the cells do not fill whole rows
        """
        if row_length <= 0 or len(cells) % row_length:
            raise ValueError(
                f"{len(cells)} cells do not fill rows of {row_length}"
            )

        data = np.empty(len(cells), dtype=object)
        for i, cell in enumerate(cells):
            data[i] = cell

        return [list(row) for row in data.reshape(-1, row_length)]

    @staticmethod
    def to_dataframe(cells: Sequence[Cell], row_length: int = DAYS_IN_WEEK) -> pd.DataFrame:
        """
        Convert cells to a DataFrame with one row per cell.

        Args:
            cells: Cells as returned by build_cells()
            row_length: Cells per row, used for the row/column columns

        Returns:
            Pandas DataFrame with GRID_COLUMNS
        """
        records = []
        for position, cell in enumerate(cells):
            row, column = divmod(position, row_length)
            parts = cell.date
            records.append({
                'position': position,
                'row': row,
                'column': column,
                'year': parts.year if parts else None,
                'month': parts.month if parts else None,
                'day': parts.day if parts else None,
                'date': parts.isoformat() if parts else None,
                'belongs_to_requested_period': cell.belongs_to_requested_period,
                'is_blank': cell.is_blank,
                'is_current_date': cell.is_current_date,
            })

        df = pd.DataFrame.from_records(records, columns=GRID_COLUMNS)
        for column in ('year', 'month', 'day'):
            df[column] = df[column].astype('Int64')
        return df
