"""
Immutable hourly generation profile.

The profile is a normalized generation shape, one value per simulated hour,
expressed against a reference stack size (see DispatchConfig.base_stack_capacity).
"""

import hashlib
from typing import Iterable, Iterator, Union, overload

import numpy as np

from h2_sizing.core.constants import PROFILE_TOLERANCE
from h2_sizing.core.exceptions import InvalidProfile
from h2_sizing.core.types import FloatArray


class HourlyProfile:
    """
    Ordered, read-only sequence of non-negative hourly values.

    Backed by a float64 NumPy array with the write flag cleared, so neither
    the simulator nor callers can mutate a loaded profile.

    Attributes:
        values (np.ndarray): Read-only float64 array of hourly values.

    Example:
        >>> profile = HourlyProfile([0.0, 120.5, 350.0])
        >>> len(profile), profile[2]
        (3, 350.0)
    """

    __slots__ = ('_values', '_fingerprint')

    def __init__(self, values: Union[Iterable[float], FloatArray]):
        array = np.array(values, dtype=np.float64).reshape(-1)
        if array.size and not np.all(np.isfinite(array)):
            raise InvalidProfile("Profile values must be finite")
        if array.size and np.any(array < 0.0):
            raise InvalidProfile("Profile values must be non-negative")
        array.setflags(write=False)
        self._values = array
        self._fingerprint = None

    @property
    def values(self) -> FloatArray:
        return self._values

    @property
    def hours(self) -> int:
        return int(self._values.size)

    @property
    def fingerprint(self) -> str:
        """SHA-256 digest of the profile contents, stable across processes."""
        if self._fingerprint is None:
            self._fingerprint = hashlib.sha256(self._values.tobytes()).hexdigest()
        return self._fingerprint

    def __len__(self) -> int:
        return int(self._values.size)

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: slice) -> 'HourlyProfile': ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return HourlyProfile(self._values[index])
        return float(self._values[index])

    def __iter__(self) -> Iterator[float]:
        return iter(self._values.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HourlyProfile):
            return NotImplemented
        return self.isclose(other)

    def __repr__(self) -> str:
        return f"HourlyProfile(hours={self.hours}, total={self.total():.3f})"

    def isclose(self, other: 'HourlyProfile', tolerance: float = PROFILE_TOLERANCE) -> bool:
        """Element-wise equality within an absolute tolerance."""
        if len(self) != len(other):
            return False
        return bool(np.allclose(self._values, other._values, rtol=0.0, atol=tolerance))

    def total(self) -> float:
        return float(self._values.sum())

    def tolist(self) -> list:
        return self._values.tolist()
