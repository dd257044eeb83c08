"""
Hourly Dispatch Simulation Engine.

This module steps a storage inventory through an hourly generation profile,
dispatching to the client under tiered supply rules and venting when storage
saturates, then hands the run aggregates to the SizingEvaluator.

Execution Architecture:
    1. **Initialization**: Fresh SimulationState seeded with the initial stock.
    2. **Timestep Execution**: One ``dispatch_hour`` transition per hour.
    3. **Recording**: Optional per-hour trajectory in preallocated arrays.
    4. **Evaluation**: Frozen aggregates turned into a SizingResult.

Runs share no mutable state, so independent configurations can be simulated
concurrently without locking (see ``runner.run_parameter_sweep``).
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from h2_sizing.config.dispatch_config import DispatchConfig
from h2_sizing.config.validator import ConfigValidator
from h2_sizing.core.enums import DispatchTier
from h2_sizing.core.types import FloatArray, TierArray
from h2_sizing.data.profile import HourlyProfile
from h2_sizing.economics.models import SizingResult
from h2_sizing.economics.sizing import SizingEvaluator
from h2_sizing.simulation.dispatch import VENTING_STRATEGIES, dispatch_hour
from h2_sizing.simulation.state import SimulationState, StateSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Trajectory:
    """
    Per-hour record of a run.

    All arrays have one entry per simulated hour; ``stock`` is the stock
    carried out of each hour.
    """
    generation: FloatArray
    stock_pre_supply: FloatArray
    tier: TierArray
    supply: FloatArray
    vent: FloatArray
    stock: FloatArray

    @classmethod
    def allocate(cls, hours: int) -> 'Trajectory':
        return cls(
            generation=np.zeros(hours, dtype=np.float64),
            stock_pre_supply=np.zeros(hours, dtype=np.float64),
            tier=np.zeros(hours, dtype=np.int8),
            supply=np.zeros(hours, dtype=np.float64),
            vent=np.zeros(hours, dtype=np.float64),
            stock=np.zeros(hours, dtype=np.float64),
        )

    def __len__(self) -> int:
        return int(self.stock.size)

    def tier_hours(self, tier: DispatchTier) -> int:
        return int(np.count_nonzero(self.tier == tier))

    def to_dataframe(self, cumulative: bool = False) -> pd.DataFrame:
        """
        Tabular view indexed by hour.

        Args:
            cumulative (bool): Add running totals of generation, supply
                and vent (``*_cum`` columns).
        """
        df = pd.DataFrame(
            {
                'generation': self.generation,
                'stock_pre_supply': self.stock_pre_supply,
                'tier': [DispatchTier(code).name for code in self.tier],
                'supply': self.supply,
                'vent': self.vent,
                'stock': self.stock,
            },
            index=pd.RangeIndex(len(self), name='hour'),
        )
        if cumulative:
            for column in ('generation', 'supply', 'vent'):
                df[f'{column}_cum'] = df[column].cumsum()
        return df


@dataclass(frozen=True)
class SimulationOutcome:
    """
    Output of one DispatchSimulator run.

    Attributes:
        config (DispatchConfig): Configuration the run used.
        totals (StateSnapshot): Final aggregates.
        trajectory (Trajectory, optional): Per-hour record, if requested.
    """
    config: DispatchConfig
    totals: StateSnapshot
    trajectory: Optional[Trajectory] = None


class DispatchSimulator:
    """
    Deterministic hourly storage/dispatch simulator.

    The configuration is expected to have passed ConfigValidator; the loop
    itself never raises for a validated configuration.

    Example:
        >>> simulator = DispatchSimulator(config)
        >>> outcome = simulator.run(profile, record_trajectory=True)
        >>> outcome.totals.peak_stock, outcome.trajectory.to_dataframe().head()
    """

    def __init__(self, config: DispatchConfig):
        self.config = config
        self.strategy = VENTING_STRATEGIES[config.venting_rule]

    def run(self, profile: HourlyProfile, record_trajectory: bool = False) -> SimulationOutcome:
        """
        Simulate every hour of the profile.

        Args:
            profile (HourlyProfile): Normalized hourly generation.
            record_trajectory (bool): Keep the per-hour record.

        Returns:
            SimulationOutcome: Final aggregates (and trajectory).
        """
        state = SimulationState.start(self.config.initial_stock)
        hours = len(profile)
        trajectory = Trajectory.allocate(hours) if record_trajectory else None

        if hours == 0:
            logger.debug("Empty profile: returning zeroed aggregates")
            return SimulationOutcome(self.config, state.snapshot(), trajectory)

        logger.debug(f"Simulating {hours} hours (venting rule: {self.config.venting_rule.value})")

        for t, value in enumerate(profile.values.tolist()):
            step = dispatch_hour(state.stock, value, self.config, self.strategy)
            state.apply(step)
            if trajectory is not None:
                trajectory.generation[t] = step.generation
                trajectory.stock_pre_supply[t] = step.stock_pre_supply
                trajectory.tier[t] = step.tier
                trajectory.supply[t] = step.supply
                trajectory.vent[t] = step.vent
                trajectory.stock[t] = step.stock

        totals = state.snapshot()
        logger.debug(
            f"Run complete: generated {totals.generated:.1f}, supplied {totals.supplied:.1f}, "
            f"vented {totals.vented:.1f}, peak {totals.peak_stock:.1f} NM3"
        )
        return SimulationOutcome(self.config, totals, trajectory)


def simulate(profile: HourlyProfile, config: DispatchConfig) -> SizingResult:
    """
    Validate, simulate and evaluate in one call.

    Pure and deterministic: identical inputs always give identical results.

    Raises:
        InvalidConfig: If the configuration fails validation.
    """
    ConfigValidator(config).validate()
    outcome = DispatchSimulator(config).run(profile)
    return SizingEvaluator(config).evaluate(outcome.totals)
