"""
Sizing report export.

Outputs:
    - JSON summary: scenario name, configuration and SizingResult (camelCase keys).
    - CSV trajectory: one row per simulated hour with running totals.
    - Markdown table: display-formatted figures for quick review.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Dict, Any

import numpy as np

from h2_sizing.config.dispatch_config import DispatchConfig
from h2_sizing.core.exceptions import ExportError
from h2_sizing.economics.models import SizingResult
from h2_sizing.simulation.engine import Trajectory

logger = logging.getLogger(__name__)


class NpEncoder(json.JSONEncoder):
    """
    JSON encoder for NumPy types.

    Converts NumPy arrays and scalar types to JSON-serializable
    Python equivalents.
    """

    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, Path):
            return str(obj)
        return super(NpEncoder, self).default(obj)


def build_summary(
    result: SizingResult,
    config: Optional[DispatchConfig] = None,
    scenario_name: Optional[str] = None,
    hours: Optional[int] = None,
) -> Dict[str, Any]:
    """Assemble the JSON-ready summary payload."""
    summary: Dict[str, Any] = {
        'generated_at': datetime.now().isoformat(),
        'scenario': scenario_name,
        'hours_simulated': hours,
        'results': result.model_dump(by_alias=True),
    }
    if config is not None:
        summary['config'] = config.to_dict()
    return summary


def export_summary(
    result: SizingResult,
    path: Path | str,
    config: Optional[DispatchConfig] = None,
    scenario_name: Optional[str] = None,
    hours: Optional[int] = None,
) -> Path:
    """
    Write the sizing summary as JSON.

    Returns:
        Path: The written file.

    Raises:
        ExportError: If the file cannot be written.
    """
    path = Path(path)
    summary = build_summary(result, config, scenario_name, hours)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(summary, f, indent=2, cls=NpEncoder)
    except OSError as e:
        raise ExportError(f"Cannot write sizing summary {path}: {e}") from e
    logger.info(f"Sizing summary saved to: {path}")
    return path


def export_trajectory(trajectory: Trajectory, path: Path | str) -> Path:
    """Write the hourly trajectory, with running totals, as CSV (raises ExportError)."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        trajectory.to_dataframe(cumulative=True).to_csv(path)
    except OSError as e:
        raise ExportError(f"Cannot write trajectory {path}: {e}") from e
    logger.info(f"Trajectory ({len(trajectory)} hours) saved to: {path}")
    return path


def render_markdown(result: SizingResult, scenario_name: Optional[str] = None) -> str:
    """Render the display figures as a Markdown table."""
    lines = []
    if scenario_name:
        lines.append(f"## Sizing results: {scenario_name}")
        lines.append("")
    lines.append("| Metric | Value |")
    lines.append("|---|---|")
    for label, value in result.to_summary_dict().items():
        lines.append(f"| {label} | {value} |")
    return "\n".join(lines)
