"""Simulation module: Simulated users for offline evaluation runs.

This module provides:
- Simulator: Runs simulated sessions through an EvaluationService
- SimulationReport: Aggregated session verdicts
- click_models/: User behavior simulation

Example usage:
    from simulation import Simulator
    from simulation.click_models import PositionBasedModel
"""

from simulation.simulator import Simulator, SimulationReport, grade_relevance
from simulation.click_models import (
    PositionBasedModel,
    CascadeModel,
)

__all__ = [
    "Simulator",
    "SimulationReport",
    "grade_relevance",
    "PositionBasedModel",
    "CascadeModel",
]
