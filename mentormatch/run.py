"""
Command-line runner for the mentor matching engine.

Ranks a mentor pool for one mentee and writes the results to disk.

Usage:
    python -m mentormatch.run --config configs/config.yaml \
        --mentee data/sample_mentee.json --mentors data/sample_mentors.json

The runner performs the following steps:
1. Load and validate configuration
2. Load the mentee profile and mentor pool
3. Rank mentors
4. Analyze the mentee profile
5. Build the matching report (distribution + weight sensitivity)
6. Save matches.json, matches.csv and matching_report.json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Any, Optional
from datetime import datetime
import json

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging level from config."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(level)


def run_matching(
    config_path: str,
    mentee_path: str,
    mentors_path: str,
    max_results: Optional[int] = None,
    output_dir: Optional[str] = None
) -> Dict[str, Any]:
    """
    Rank a mentor pool for one mentee and save the outputs.

    Args:
        config_path: Path to the configuration YAML file
        mentee_path: Path to the mentee profile (JSON or YAML)
        mentors_path: Path to the mentor pool (JSON or YAML list)
        max_results: If provided, overrides matching.max_results
        output_dir: If provided, write outputs to this directory instead of config default

    Returns:
        Dictionary with run results and paths to outputs
    """
    from .configs import load_config, validate_config, get_config_value
    from .data_loading import load_mentee_profile, load_mentor_profiles
    from .ranking import MentorMatchingEngine
    from .evaluation import create_matching_report, results_to_frame

    # =========================================================================
    # 1. Load and validate configuration
    # =========================================================================
    logger.info("=" * 60)
    logger.info("MENTOR MATCHING")
    logger.info("=" * 60)

    config = load_config(config_path)
    issues = validate_config(config)
    if issues:
        for issue in issues:
            logger.warning(f"Config issue: {issue}")

    setup_logging(get_config_value(config, "global.log_level", "INFO"))

    effective_output_dir = Path(output_dir or get_config_value(config, "global.output_dir", "artifacts/matches"))
    effective_output_dir.mkdir(parents=True, exist_ok=True)

    # =========================================================================
    # 2. Load profiles
    # =========================================================================
    logger.info("\n" + "=" * 60)
    logger.info("STEP 1: Loading Profiles")
    logger.info("=" * 60)

    mentee = load_mentee_profile(mentee_path)
    mentors = load_mentor_profiles(mentors_path)

    # =========================================================================
    # 3. Rank mentors
    # =========================================================================
    logger.info("\n" + "=" * 60)
    logger.info("STEP 2: Ranking Mentors")
    logger.info("=" * 60)

    engine = MentorMatchingEngine.from_config(config)
    results = engine.find_best_matches(mentee, mentors, max_results=max_results)

    for rank, result in enumerate(results, start=1):
        logger.info(f"  {rank:2d}. {result.mentor.display_name} ({result.mentor.id}) "
                    f"score={result.match_score} confidence={result.confidence.value}")
        for reason in result.match_reasons:
            logger.info(f"        + {reason}")
        for challenge in result.potential_challenges:
            logger.info(f"        - {challenge}")

    if not results:
        logger.warning("No mentors scored above the minimum score")

    # =========================================================================
    # 4. Analyze mentee profile
    # =========================================================================
    logger.info("\n" + "=" * 60)
    logger.info("STEP 3: Analyzing Mentee Profile")
    logger.info("=" * 60)

    analysis = engine.analyze_mentee_profile(mentee)
    logger.info(f"Strengths: {', '.join(analysis.strengths) or 'none identified'}")
    logger.info(f"Areas for improvement: {', '.join(analysis.areas_for_improvement) or 'none identified'}")
    logger.info(f"Recommended mentor types: {', '.join(analysis.recommended_mentor_types)}")

    # =========================================================================
    # 5. Build report
    # =========================================================================
    logger.info("\n" + "=" * 60)
    logger.info("STEP 4: Evaluating Ranking")
    logger.info("=" * 60)

    report = create_matching_report(
        engine, mentee, mentors, results,
        quantiles=get_config_value(config, "evaluation.quantiles", [0.1, 0.25, 0.5, 0.75, 0.9]),
        n_perturbations=get_config_value(config, "evaluation.n_perturbations", 20),
        noise_scale=get_config_value(config, "evaluation.noise_scale", 0.2),
        top_k=get_config_value(config, "evaluation.top_k", 5),
        random_seed=get_config_value(config, "global.random_seed", 42)
    )
    logger.info("\n" + report.summary())

    # =========================================================================
    # 6. Save outputs
    # =========================================================================
    logger.info("\n" + "=" * 60)
    logger.info("STEP 5: Saving Outputs")
    logger.info("=" * 60)

    matches_json = effective_output_dir / "matches.json"
    with open(matches_json, "w") as f:
        json.dump({
            "mentee_id": mentee.id,
            "generated_at": datetime.now().isoformat(),
            "matches": [result.to_dict() for result in results],
            "mentee_analysis": analysis.to_dict()
        }, f, indent=2)
    logger.info(f"Saved matches to {matches_json}")

    matches_csv = effective_output_dir / "matches.csv"
    results_to_frame(results).to_csv(matches_csv, index=False)
    logger.info(f"Saved match table to {matches_csv}")

    report_path = effective_output_dir / "matching_report.json"
    report.save(str(report_path))

    logger.info("\n" + "=" * 60)
    logger.info("MATCHING COMPLETE")
    logger.info("=" * 60)

    return {
        "n_mentors": len(mentors),
        "n_matches": len(results),
        "output_dir": str(effective_output_dir),
        "outputs": {
            "matches_json": str(matches_json),
            "matches_csv": str(matches_csv),
            "report": str(report_path)
        }
    }


def main(argv=None):
    """Main entry point for the matching runner."""
    parser = argparse.ArgumentParser(
        description="Rank mentors for a mentee"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="configs/config.yaml",
        help="Path to configuration file"
    )
    parser.add_argument(
        "--mentee",
        type=str,
        required=True,
        help="Path to the mentee profile (JSON or YAML)"
    )
    parser.add_argument(
        "--mentors",
        type=str,
        required=True,
        help="Path to the mentor pool (JSON or YAML list)"
    )
    parser.add_argument(
        "--max-results",
        type=int,
        default=None,
        help="Maximum number of matches to return (overrides config)"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Output directory for results (overrides config)"
    )

    args = parser.parse_args(argv)

    try:
        result = run_matching(
            args.config,
            args.mentee,
            args.mentors,
            max_results=args.max_results,
            output_dir=args.output_dir
        )
        logger.info(f"\nMatching completed: {result['n_matches']} matches written to {result['output_dir']}")
        return 0
    except Exception as e:
        logger.exception(f"Matching failed with error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
