"""Base class for click simulation models.

Click models simulate user clicking behavior on a presented page of
postings, providing the feedback signal for the old-vs-new comparison.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence
import numpy as np


class ClickSimulator(ABC):
    """Abstract base class for user click simulation.

    Click simulators model how users interact with a page of postings:
    - PositionBasedModel: Examination probability decreases with position
    - CascadeModel: User scans top-down, clicks first relevant posting

    Subclasses must implement:
    - simulate(): Generate click positions for a page
    """

    @abstractmethod
    def simulate(
        self,
        relevance: Sequence[int],
        rng: np.random.Generator,
    ) -> List[int]:
        """Simulate user clicks on a page.

        Args:
            relevance: Relevance grade (0-4) of each displayed posting, in display order.
            rng: Random number generator for stochastic simulation.

        Returns:
            List of clicked positions (0-indexed into the page).
        """
        pass
