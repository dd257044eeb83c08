"""
High-Level Sizing Runner Utilities.

This module is the boundary between the sizing core and its callers: errors
raised inside the package are returned as typed ``SizingOutcome`` values so
presentation layers can show a specific message without catching anything.

Entry Points:
    - `evaluate()`: One validated simulation, optionally memoized.
    - `evaluate_text()`: Same, starting from uploaded CSV text.
    - `run_parameter_sweep()`: Many configurations against one profile.
    - `run_sizing_from_config()`: Scenario file execution with exports.
    - `main()`: CLI entry point for command-line execution.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace
from itertools import product
from pathlib import Path
from typing import Optional, Dict, Any, List, Sequence, Tuple
import argparse
import logging
import sys

from h2_sizing.config.dispatch_config import DispatchConfig
from h2_sizing.config.loaders import load_scenario
from h2_sizing.config.validator import ConfigValidator
from h2_sizing.core.constants import TEMPLATE_FILENAME
from h2_sizing.core.enums import VentingRule
from h2_sizing.core.exceptions import H2SizingError, SimulationError
from h2_sizing.data.profile import HourlyProfile
from h2_sizing.data.profile_loader import ProfileLoader
from h2_sizing.economics.models import SizingResult
from h2_sizing.economics.sizing import SizingEvaluator
from h2_sizing.reporting.summary import export_summary, export_trajectory, render_markdown
from h2_sizing.simulation.cache import SimulationCache
from h2_sizing.simulation.engine import DispatchSimulator, Trajectory

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class SizingOutcome:
    """
    Typed result of a sizing request: exactly one of ``result`` / ``error``.

    Attributes:
        result (SizingResult, optional): Metrics of a successful run.
        error (H2SizingError, optional): Why the run was rejected.
        warnings (Tuple[str, ...]): Accepted-but-degenerate configuration notes.
        trajectory (Trajectory, optional): Hourly record, when requested.
    """
    result: Optional[SizingResult] = None
    error: Optional[H2SizingError] = None
    warnings: Tuple[str, ...] = ()
    trajectory: Optional[Trajectory] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _simulate_validated(profile: HourlyProfile, config: DispatchConfig) -> SizingResult:
    outcome = DispatchSimulator(config).run(profile)
    return SizingEvaluator(config).evaluate(outcome.totals)


def evaluate(
    profile: HourlyProfile,
    config: DispatchConfig,
    cache: Optional[SimulationCache] = None,
    record_trajectory: bool = False,
) -> SizingOutcome:
    """
    Validate the configuration and run one sizing simulation.

    Args:
        profile (HourlyProfile): Hourly generation profile.
        config (DispatchConfig): Dispatch configuration.
        cache (SimulationCache, optional): Memoization cache. Bypassed when
            a trajectory is requested.
        record_trajectory (bool): Attach the hourly trajectory.

    Returns:
        SizingOutcome: Result or typed error; never raises H2SizingError.
    """
    check = ConfigValidator(config).check()
    if not check.ok:
        logger.info(f"Configuration rejected: {check.error}")
        return SizingOutcome(error=check.error)
    warnings = tuple(check.warnings)

    try:
        if record_trajectory:
            outcome = DispatchSimulator(config).run(profile, record_trajectory=True)
            result = SizingEvaluator(config).evaluate(outcome.totals)
            return SizingOutcome(result=result, warnings=warnings, trajectory=outcome.trajectory)
        if cache is not None:
            result = cache.get_or_compute(profile, config, _simulate_validated)
        else:
            result = _simulate_validated(profile, config)
    except H2SizingError as e:
        logger.error(f"Sizing run failed: {e}")
        return SizingOutcome(error=e, warnings=warnings)

    return SizingOutcome(result=result, warnings=warnings)


def evaluate_text(
    profile_text: Optional[str],
    config: DispatchConfig,
    loader: Optional[ProfileLoader] = None,
    cache: Optional[SimulationCache] = None,
) -> SizingOutcome:
    """
    Size from uploaded CSV text; blank or missing text uses the reference profile.

    Profile errors (InvalidProfile, DataUnavailable) come back as the
    outcome's error.
    """
    loader = loader or ProfileLoader()
    try:
        profile = loader.resolve(profile_text)
    except H2SizingError as e:
        logger.info(f"Profile rejected: {e}")
        return SizingOutcome(error=e)
    return evaluate(profile, config, cache=cache)


def build_sweep(base: DispatchConfig, **ranges: Sequence[Any]) -> List[DispatchConfig]:
    """
    Cartesian product of field values applied to a base configuration.

    Example:
        >>> configs = build_sweep(base, installed_capacity=[9000, 11000],
        ...                       storage_capacity=[80000, 100000])
        >>> len(configs)
        4
    """
    if not ranges:
        return [base]
    unknown = set(ranges) - set(DispatchConfig.field_names())
    if unknown:
        raise ValueError(f"Unknown DispatchConfig fields: {sorted(unknown)}")
    names = list(ranges)
    return [replace(base, **dict(zip(names, values))) for values in product(*(ranges[n] for n in names))]


def run_parameter_sweep(
    profile: HourlyProfile,
    configs: Sequence[DispatchConfig],
    max_workers: Optional[int] = None,
    cache: Optional[SimulationCache] = None,
) -> List[SizingOutcome]:
    """
    Evaluate many configurations against one profile concurrently.

    Runs share no mutable state; the only shared object is the optional
    cache, which is thread-safe. A rejected or failing configuration yields
    an error outcome in its slot and never aborts the sweep.

    Returns:
        List[SizingOutcome]: One outcome per config, in input order.
    """
    outcomes: List[Optional[SizingOutcome]] = [None] * len(configs)
    logger.info(f"Running parameter sweep over {len(configs)} configurations")

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_to_index = {
            executor.submit(evaluate, profile, config, cache): index
            for index, config in enumerate(configs)
        }
        for future, index in future_to_index.items():
            try:
                outcomes[index] = future.result()
            except Exception as e:
                logger.error(f"Sweep configuration {index} failed: {e}")
                outcomes[index] = SizingOutcome(error=SimulationError(f"Configuration {index} failed: {e}"))

    failed = sum(1 for outcome in outcomes if not outcome.ok)
    logger.info(f"Parameter sweep finished: {len(configs) - failed} ok, {failed} rejected")
    return outcomes


def run_sizing_from_config(
    config_path: Optional[Path | str] = None,
    profile_path: Optional[Path | str] = None,
    output_path: Optional[Path | str] = None,
    trajectory_path: Optional[Path | str] = None,
    template_path: Optional[Path | str] = None,
    venting_rule: Optional[VentingRule | str] = None,
) -> SizingOutcome:
    """
    Run a complete sizing study from a scenario file.

    Handles scenario loading, profile selection, simulation, evaluation and
    exports.

    Args:
        config_path (Path | str, optional): Scenario YAML/JSON. Default:
            reference workbook configuration.
        profile_path (Path | str, optional): CSV profile; overrides the
            scenario's profile. Default: reference profile.
        output_path (Path | str, optional): JSON summary destination.
        trajectory_path (Path | str, optional): Hourly CSV destination.
        template_path (Path | str, optional): Writes the profile used as an
            editable CSV template.
        venting_rule (VentingRule | str, optional): Overrides the scenario's
            venting rule.

    Returns:
        SizingOutcome: Result or typed error.

    Example:
        >>> outcome = run_sizing_from_config("configs/default_sizing.yaml")
        >>> print(f"Cylinders: {outcome.result.number_of_cylinders}")
    """
    loader = ProfileLoader()
    try:
        if config_path is not None:
            scenario = load_scenario(config_path)
            name, config, scenario_profile = scenario.name, scenario.config, scenario.profile_path
        else:
            name, config, scenario_profile = "Reference workbook", DispatchConfig(), None

        if venting_rule is not None:
            config = replace(config, venting_rule=venting_rule)

        source = profile_path or scenario_profile
        profile = loader.load_file(source) if source is not None else loader.load_default()

        if template_path is not None:
            loader.save_template(profile, template_path)
    except H2SizingError as e:
        logger.error(f"Sizing setup failed: {e}")
        return SizingOutcome(error=e)

    logger.info(f"Running sizing scenario: {name} ({len(profile)} hours)")
    outcome = evaluate(profile, config, record_trajectory=trajectory_path is not None)
    if not outcome.ok:
        return outcome

    try:
        if output_path is not None:
            export_summary(outcome.result, output_path, config=config, scenario_name=name, hours=len(profile))
        if trajectory_path is not None:
            export_trajectory(outcome.trajectory, trajectory_path)
    except H2SizingError as e:
        logger.error(f"Sizing export failed: {e}")
        return SizingOutcome(error=e, warnings=outcome.warnings)

    logger.info("\n" + render_markdown(outcome.result, name))
    return outcome


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point for command-line sizing runs.

    Usage:
        h2-size configs/default_sizing.yaml --profile upload.csv --output result.json
    """
    parser = argparse.ArgumentParser(description="Size hydrogen storage from an hourly generation profile.")
    parser.add_argument("config_file", nargs="?", default=None,
                        help="Scenario YAML/JSON file (default: reference workbook values).")
    parser.add_argument("--profile", type=str, default=None, help="CSV hourly profile to use instead of the reference.")
    parser.add_argument("--output", type=str, default=None, help="Path for the JSON sizing summary.")
    parser.add_argument("--trajectory", type=str, default=None, help="Path for the hourly trajectory CSV.")
    parser.add_argument("--export-template", type=str, nargs="?", const=TEMPLATE_FILENAME, default=None,
                        help="Write the profile used as an editable CSV template.")
    parser.add_argument("--venting-rule", type=str, choices=[rule.value for rule in VentingRule], default=None,
                        help="Override the scenario's venting rule.")
    parser.add_argument("--log-level", type=str.upper, default="INFO", choices=LOG_LEVELS,
                        help="Logging level (default: INFO).")

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format='%(asctime)s - %(levelname)s - %(message)s')

    outcome = run_sizing_from_config(
        config_path=args.config_file,
        profile_path=args.profile,
        output_path=args.output,
        trajectory_path=args.trajectory,
        template_path=args.export_template,
        venting_rule=args.venting_rule,
    )
    if not outcome.ok:
        print(f"error: {outcome.error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
