from h2_sizing.simulation.dispatch import (
    HourlyDispatch,
    VentingStrategy,
    CompoundVentingStrategy,
    CapacityExcessVentingStrategy,
    dispatch_hour,
    select_tier,
)
from h2_sizing.simulation.state import SimulationState, StateSnapshot
from h2_sizing.simulation.engine import DispatchSimulator, SimulationOutcome, Trajectory, simulate
from h2_sizing.simulation.cache import SimulationCache

__all__ = [
    'HourlyDispatch',
    'VentingStrategy',
    'CompoundVentingStrategy',
    'CapacityExcessVentingStrategy',
    'dispatch_hour',
    'select_tier',
    'SimulationState',
    'StateSnapshot',
    'DispatchSimulator',
    'SimulationOutcome',
    'Trajectory',
    'simulate',
    'SimulationCache',
]
