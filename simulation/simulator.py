"""Simulated user sessions against an EvaluationService.

Each session is one independent evaluation:
1. Clear the service caches (fresh interleaving, no carried-over clicks)
2. Serve a page
3. Let the click model click on it, using hidden relevance grades
4. Record the clicks and read the session verdict

Session verdicts are aggregated into a SimulationReport.
"""

import time
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Optional, Union

import numpy as np

from core.base import ClickSimulator
from core.types import SOURCE_NEW, SOURCE_OLD, WINNER_TIE, Candidate, EvaluationSummary, FilterParams
from interleaving_eval.service import EvaluationService


def grade_relevance(candidate: Candidate) -> int:
    """Hidden relevance grade (0-4) of a posting, from its score in [0, 100)."""
    return int(min(4, max(0, candidate.score // 20)))


@dataclass
class SimulationReport:
    """Aggregate outcome of many simulated sessions.

    Attributes:
        sessions: Number of sessions run.
        old_wins: Sessions won by the old ranker.
        new_wins: Sessions won by the new ranker.
        ties: Sessions with equal clicks (including no clicks).
        old_clicks: Clicks credited to the old ranker across sessions.
        new_clicks: Clicks credited to the new ranker across sessions.
    """
    sessions: int = 0
    old_wins: int = 0
    new_wins: int = 0
    ties: int = 0
    old_clicks: int = 0
    new_clicks: int = 0

    def add(self, summary: EvaluationSummary) -> None:
        self.sessions += 1
        self.old_clicks += summary.old_clicks
        self.new_clicks += summary.new_clicks
        if summary.winner == SOURCE_OLD:
            self.old_wins += 1
        elif summary.winner == SOURCE_NEW:
            self.new_wins += 1
        else:
            self.ties += 1

    @property
    def overall_winner(self) -> str:
        """Ranker with more session wins, or "tie"."""
        if self.old_wins > self.new_wins:
            return SOURCE_OLD
        if self.new_wins > self.old_wins:
            return SOURCE_NEW
        return WINNER_TIE

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["overall_winner"] = self.overall_winner
        return data


class Simulator:
    """Drives simulated users through an EvaluationService."""

    def __init__(
        self,
        service: EvaluationService,
        click_model: ClickSimulator,
        random_seed: Union[int, np.random.SeedSequence, None] = 42,
        relevance_fn: Callable[[Candidate], int] = grade_relevance,
        verbose: bool = True,
    ):
        """Initialize simulator.

        Args:
            service: Service under evaluation.
            click_model: Click model for user simulation.
            random_seed: Seed (or SeedSequence) for click draws.
            relevance_fn: Hidden relevance grade of a posting.
            verbose: Print progress.
        """
        self.service = service
        self.click_model = click_model
        self.rng = np.random.default_rng(random_seed)
        self.relevance_fn = relevance_fn
        self.verbose = verbose

    def run_session(
        self,
        filters: Optional[FilterParams] = None,
        page: int = 1,
        per_page: int = 10,
    ) -> EvaluationSummary:
        """Run one session and return its verdict."""
        self.service.clear_cache()
        result = self.service.get_page(page=page, per_page=per_page, filters=filters)

        relevance = [self.relevance_fn(c) for c in result.items]
        for pos in self.click_model.simulate(relevance, self.rng):
            self.service.record_click(result.items[pos].id)

        return self.service.summarize()

    def run(
        self,
        n_sessions: int,
        filters: Optional[FilterParams] = None,
        page: int = 1,
        per_page: int = 10,
        log_every: int = 0,
    ) -> SimulationReport:
        """Run many sessions and aggregate their verdicts.

        Args:
            n_sessions: Number of sessions.
            filters: Filters applied to every session.
            page: Page each simulated user looks at.
            per_page: Page size.
            log_every: Print a progress line every N sessions (0 = never).

        Returns:
            SimulationReport over all sessions.
        """
        report = SimulationReport()
        start_time = time.time()

        for i in range(n_sessions):
            report.add(self.run_session(filters=filters, page=page, per_page=per_page))

            if self.verbose and log_every and (i + 1) % log_every == 0:
                print(
                    f"[Sim] {i + 1}/{n_sessions} sessions | "
                    f"old {report.old_wins} / new {report.new_wins} / tie {report.ties}"
                )

        if self.verbose:
            print(f"[Sim] {n_sessions} sessions complete in {time.time() - start_time:.1f}s")

        return report
