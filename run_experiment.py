import argparse
import json
import time
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, Optional, Tuple

import numpy as np

from config import EvaluationConfig, get_scenario

from core.types import FilterParams
from interleaving_eval import EvaluationService, DataFrameCandidateSource
from interleaving_eval.strategies import list_available_strategies
from simulation import Simulator
from simulation.click_models import PositionBasedModel, CascadeModel


def create_click_model(config: EvaluationConfig, verbose: bool = True):
    scenario_def = get_scenario(config.scenario)
    model_type = scenario_def["click_model_type"]
    params = scenario_def["params"].copy()

    if verbose:
        print(f"Initializing {model_type} with params: {params}")

    if model_type == "pbm":
        return PositionBasedModel(max_positions=config.per_page, **params)
    elif model_type == "cascade":
        return CascadeModel(**params)
    else:
        raise ValueError(f"Unknown click model type: {model_type}")


def spawn_seeds(seed: Optional[int]) -> Tuple[np.random.SeedSequence, np.random.SeedSequence]:
    """Independent seeds for the interleaving coin and the simulated clicks."""
    interleave_seed, click_seed = np.random.SeedSequence(seed).spawn(2)
    return interleave_seed, click_seed


def run_experiment(
    config: EvaluationConfig,
    filters: Optional[FilterParams] = None,
    candidates_path: Optional[str] = None,
) -> Dict[str, Any]:
    """Run a simulated old-vs-new evaluation.

    Args:
        config: Evaluation configuration.
        filters: Filters applied to every session.
        candidates_path: Optional Parquet file of candidates (default: synthetic pool).

    Returns:
        Dict with config, filters, report and timing.
    """
    filters = filters or FilterParams()

    print("=" * 60)
    print(f"EVALUATION START: {config.scenario.upper()} SCENARIO")
    print(f"Old: {config.old_strategy} | New: {config.new_strategy}")
    print(f"Sessions: {config.n_sessions} | Page size: {config.per_page}")
    print("=" * 60)

    print("\n[1/3] Creating service...")
    source = None
    if candidates_path:
        source = DataFrameCandidateSource.from_parquet(candidates_path)
        print(f"Loaded {len(source)} candidates from {candidates_path}")
    interleave_seed, click_seed = spawn_seeds(config.random_seed)
    service = EvaluationService.from_config(config, source=source, rng=np.random.default_rng(interleave_seed))

    print("\n[2/3] Creating click model...")
    click_model = create_click_model(config)

    print("\n[3/3] Running sessions...")
    start_time = time.time()
    simulator = Simulator(service, click_model, random_seed=click_seed)
    report = simulator.run(
        config.n_sessions,
        filters=filters,
        per_page=config.per_page,
        log_every=max(1, config.n_sessions // 10),
    )
    elapsed = time.time() - start_time

    print("\n" + "=" * 60)
    print(f"Old wins: {report.old_wins} | New wins: {report.new_wins} | Ties: {report.ties}")
    print(f"Old clicks: {report.old_clicks} | New clicks: {report.new_clicks}")
    print(f"Overall winner: {report.overall_winner}")
    print("=" * 60)

    return {
        "config": asdict(config),
        "filters": asdict(filters),
        "report": report.to_dict(),
        "elapsed_seconds": elapsed,
    }


def save_results(
    results: Dict,
    output_path: Optional[str] = None,
    output_dir: str = "evaluation_results"
) -> str:
    """Saves results to a specific file or a timestamped file in output_dir.

    Args:
        results: Dict of experiment results.
        output_path: If provided, exact path to write (overrides default naming).
        output_dir: Directory for default timestamped files.

    Returns:
        Path to saved file.
    """
    if output_path:
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
    else:
        Path(output_dir).mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        scen = results["config"]["scenario"]
        old = results["config"]["old_strategy"]
        new = results["config"]["new_strategy"]
        filename = f"{ts}_{scen}_{old}_vs_{new}.json"
        path = Path(output_dir) / filename

    with open(path, "w") as f:
        json.dump(results, f, indent=2, default=str)

    print(f"\nSaved results to: {path}")
    return str(path)


def build_parser() -> argparse.ArgumentParser:
    strategies = list_available_strategies()

    parser = argparse.ArgumentParser(description="Simulated balanced interleaving evaluation")
    parser.add_argument("--sessions", type=int, default=1000)
    parser.add_argument("--scenario", type=str, default="standard")
    parser.add_argument("--per-page", type=int, default=10)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--old", type=str, default="score", choices=strategies)
    parser.add_argument("--new", type=str, default="blended", choices=strategies)
    parser.add_argument("--company", type=str, default=None, help="Company substring filter")
    parser.add_argument("--title", type=str, default=None, help="Title substring filter")
    parser.add_argument(
        "--candidates",
        type=str,
        default=None,
        help="Parquet file with id/title/company/score columns (default: synthetic pool)"
    )
    parser.add_argument("--quick", action="store_true", help="Run 100 sessions")
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Specific output file path. If omitted, results are not saved."
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()

    config = EvaluationConfig(
        per_page=args.per_page,
        old_strategy=args.old,
        new_strategy=args.new,
        random_seed=args.seed,
        n_sessions=100 if args.quick else args.sessions,
        scenario=args.scenario,
    )

    results = run_experiment(
        config,
        filters=FilterParams(company=args.company, title=args.title),
        candidates_path=args.candidates,
    )
    if args.output:
        save_results(results, output_path=args.output)
