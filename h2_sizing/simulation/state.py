"""
Mutable per-run simulation state.

A SimulationState lives for exactly one DispatchSimulator run. Callers only
ever see the frozen StateSnapshot taken at the end of the run.
"""

from dataclasses import dataclass

from h2_sizing.core.types import Hours, VolumeNM3
from h2_sizing.simulation.dispatch import HourlyDispatch


@dataclass(frozen=True)
class StateSnapshot:
    """Final aggregates of a run."""
    initial_stock: VolumeNM3 = 0.0
    stock: VolumeNM3 = 0.0
    generated: VolumeNM3 = 0.0
    supplied: VolumeNM3 = 0.0
    vented: VolumeNM3 = 0.0
    zero_supply_hours: Hours = 0
    peak_stock: VolumeNM3 = 0.0
    hours_simulated: Hours = 0

    @property
    def balance_error(self) -> float:
        """generated - (supplied + vented + stock change); zero up to rounding."""
        return self.generated - (self.supplied + self.vented + self.stock - self.initial_stock)


@dataclass
class SimulationState:
    """
    Running inventory and cumulative counters.

    Attributes:
        stock (float): Current inventory (NM3).
        generated (float): Cumulative generation (NM3).
        supplied (float): Cumulative supply to the client (NM3).
        vented (float): Cumulative vented volume (NM3).
        zero_supply_hours (int): Hours in which no supply was dispatched.
        peak_stock (float): Running maximum of ``stock`` (NM3).
    """
    initial_stock: VolumeNM3 = 0.0
    stock: VolumeNM3 = 0.0
    generated: VolumeNM3 = 0.0
    supplied: VolumeNM3 = 0.0
    vented: VolumeNM3 = 0.0
    zero_supply_hours: Hours = 0
    peak_stock: VolumeNM3 = 0.0
    hours_simulated: Hours = 0

    @classmethod
    def start(cls, initial_stock: VolumeNM3 = 0.0) -> 'SimulationState':
        return cls(initial_stock=initial_stock, stock=initial_stock, peak_stock=initial_stock)

    def apply(self, step: HourlyDispatch) -> None:
        """Fold one hour's dispatch into the running state."""
        self.stock = step.stock
        self.generated += step.generation
        self.supplied += step.supply
        self.vented += step.vent
        if step.zero_supply:
            self.zero_supply_hours += 1
        if step.stock > self.peak_stock:
            self.peak_stock = step.stock
        self.hours_simulated += 1

    def snapshot(self) -> StateSnapshot:
        return StateSnapshot(
            initial_stock=self.initial_stock,
            stock=self.stock,
            generated=self.generated,
            supplied=self.supplied,
            vented=self.vented,
            zero_supply_hours=self.zero_supply_hours,
            peak_stock=self.peak_stock,
            hours_simulated=self.hours_simulated,
        )
