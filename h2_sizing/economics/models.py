"""
Pydantic Models for Sizing Results

Type-safe, immutable result record. Field names are snake_case in Python;
serialized output uses the camelCase keys of the sizing web form
(``totalHydrogenGenerated``, ``numberOfCylinders``, ...).
"""

from typing import Dict, Any
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from h2_sizing.core.types import Cost, Hours, VolumeNM3


class SizingResult(BaseModel):
    """
    Capital-sizing metrics derived from one simulation run.

    Volumes in NM3; cost in the contract currency.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    total_hydrogen_generated: VolumeNM3 = Field(0.0, ge=0.0, description="Cumulative generation (NM3)")
    total_hydrogen_supplied: VolumeNM3 = Field(0.0, ge=0.0, description="Cumulative client supply (NM3)")
    total_hydrogen_vented: VolumeNM3 = Field(0.0, description="Cumulative vented volume (NM3)")
    peak_stock: VolumeNM3 = Field(0.0, ge=0.0, description="Maximum inventory over the horizon (NM3)")
    zero_supply_hours: Hours = Field(0, ge=0, description="Hours with no client supply")
    zero_supply_days: int = Field(0, ge=0, description="ceil(zero_supply_hours / 24)")
    number_of_cylinders: int = Field(0, ge=0, description="Cylinders needed to hold the peak stock")
    capital_cost: Cost = Field(0.0, ge=0.0, description="number_of_cylinders x cost per cylinder")

    def to_summary_dict(self) -> Dict[str, Any]:
        """Return display-formatted figures for quick review."""
        return {
            "Total Hydrogen Generated (NM3)": f"{round(self.total_hydrogen_generated):,}",
            "Total Hydrogen Supplied (NM3)": f"{round(self.total_hydrogen_supplied):,}",
            "Total Hydrogen Vented (NM3)": f"{round(self.total_hydrogen_vented):,}",
            "Peak Storage Level (NM3)": f"{round(self.peak_stock):,}",
            "Zero-Supply Hours": self.zero_supply_hours,
            "Zero-Supply Days": self.zero_supply_days,
            "Number of Cylinders Required": f"{self.number_of_cylinders:,}",
            "Estimated Capital Cost": f"{self.capital_cost:,.2f}",
        }
