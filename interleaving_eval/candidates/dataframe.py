"""Candidate source backed by a pandas DataFrame."""

from pathlib import Path
from typing import List, Union

import pandas as pd

from core.types import Candidate, FilterParams


# Required columns for a valid candidate table
REQUIRED_COLUMNS = {"id", "title", "company", "score"}


class DataFrameCandidateSource:
    """Serve candidates from an in-memory table.

    Rows are pre-filtered with the same substring semantics as
    ``FilterParams.matches`` (literal, case-sensitive), using vectorized
    string operations.

    Attributes:
        df: Candidate table with columns id, title, company, score.
    """

    def __init__(self, df: pd.DataFrame):
        """Initialize the source.

        Args:
            df: Candidate table.

        Raises:
            ValueError: If required columns are missing or ids are not unique.
        """
        missing = REQUIRED_COLUMNS - set(df.columns)
        if missing:
            raise ValueError(f"Candidate table missing columns: {sorted(missing)}")
        if df["id"].duplicated().any():
            raise ValueError("Candidate ids must be unique")
        self.df = df.reset_index(drop=True)

    @classmethod
    def from_parquet(cls, path: Union[str, Path]) -> "DataFrameCandidateSource":
        """Load a candidate table from a Parquet file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Candidate file not found: {path}")
        return cls(pd.read_parquet(path, columns=sorted(REQUIRED_COLUMNS)))

    def __len__(self) -> int:
        return len(self.df)

    def fetch(self, filters: FilterParams) -> List[Candidate]:
        df = self.df
        mask = pd.Series(True, index=df.index)
        if filters.company is not None:
            mask &= df["company"].astype(str).str.contains(filters.company, regex=False)
        if filters.title is not None:
            mask &= df["title"].astype(str).str.contains(filters.title, regex=False)

        return [
            Candidate(
                id=int(row.id),
                title=str(row.title),
                company=str(row.company),
                score=float(row.score),
            )
            for row in df[mask].itertuples(index=False)
        ]
