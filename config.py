"""Evaluation configuration and click model scenarios.

This module contains:
- EvaluationConfig: Dataclass with all evaluation parameters
- SCENARIOS: Click model configurations (standard, cascade)
- get_scenario(): Lookup function for scenarios
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional


# =============================================================================
# Click Model Scenarios
# =============================================================================

SCENARIOS: Dict[str, Dict[str, Any]] = {
    "standard": {
        "click_model_type": "pbm",
        "params": {},
        "description": "Standard Position-Based Model (Baseline)",
    },
    "cascade": {
        "click_model_type": "cascade",
        "params": {
            "relevance_threshold": 3,
            "max_depth": 10
        },
        "description": "Perfect Cascade: User clicks ONLY the first relevant posting",
    },
}


def get_scenario(name: str) -> Dict[str, Any]:
    """Get scenario configuration by name.

    Args:
        name: Scenario name (standard, cascade).

    Returns:
        Dict with click_model_type, params, and description.

    Raises:
        KeyError: If scenario name is unknown.
    """
    if name not in SCENARIOS:
        raise KeyError(f"Unknown scenario '{name}'. Available: {list(SCENARIOS.keys())}")
    return SCENARIOS[name]


# =============================================================================
# Evaluation Configuration
# =============================================================================

@dataclass
class EvaluationConfig:
    """Configuration for an old-vs-new interleaving evaluation.

    Groups related parameters:
    - Presentation: default page size
    - Strategies: registry names of the two competing rankers
    - Randomness: seed for the interleaving coin flip (None = fresh entropy)
    - Candidates: size and seed of the synthetic posting pool
    - Simulation: number of sessions and click model scenario
    """

    # Presentation
    per_page: int = 20

    # Strategies
    old_strategy: str = "score"
    new_strategy: str = "blended"

    # Randomness
    random_seed: Optional[int] = None

    # Synthetic candidate pool
    n_candidates: int = 100
    candidate_seed: int = 42

    # Simulation settings
    n_sessions: int = 1000
    scenario: str = "standard"

    verbose: bool = False

    def __post_init__(self):
        """Sanity checks to prevent invalid configurations."""
        if self.per_page < 1:
            raise ValueError("per_page must be >= 1")
        if self.n_candidates < 0:
            raise ValueError("n_candidates must be >= 0")
        if self.n_sessions < 1:
            raise ValueError("n_sessions must be >= 1")
        if self.scenario not in SCENARIOS:
            raise ValueError(f"Unknown scenario '{self.scenario}'. Available: {list(SCENARIOS.keys())}")
