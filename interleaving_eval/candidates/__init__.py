"""Candidate sources.

The evaluation core treats retrieval as an external collaborator; these
are the sources shipped with the repo:
- MockCandidateSource: synthetic postings with random scores
- DataFrameCandidateSource: postings from a pandas DataFrame / Parquet file
"""

from .mock import MockCandidateSource
from .dataframe import DataFrameCandidateSource, REQUIRED_COLUMNS

__all__ = [
    "MockCandidateSource",
    "DataFrameCandidateSource",
    "REQUIRED_COLUMNS",
]
