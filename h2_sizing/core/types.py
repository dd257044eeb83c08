"""
Type aliases for static type checking.
"""

from typing import TypeAlias
import numpy as np
import numpy.typing as npt

# Scalar types
VolumeNM3: TypeAlias = float     # NM3
FlowRate: TypeAlias = float      # NM3/h
Cost: TypeAlias = float          # currency units
Hours: TypeAlias = int

# Array types
FloatArray: TypeAlias = npt.NDArray[np.float64]
TierArray: TypeAlias = npt.NDArray[np.int8]  # DispatchTier codes
