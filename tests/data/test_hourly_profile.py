import numpy as np
import pytest

from h2_sizing.core.exceptions import InvalidProfile
from h2_sizing.data.profile import HourlyProfile


def test_profile_is_read_only():
    profile = HourlyProfile([1.0, 2.0])
    with pytest.raises(ValueError):
        profile.values[0] = 5.0


def test_profile_does_not_alias_source_array():
    source = np.array([1.0, 2.0])
    profile = HourlyProfile(source)
    source[0] = 99.0
    assert profile[0] == 1.0


def test_profile_rejects_negative_values():
    with pytest.raises(InvalidProfile, match="non-negative"):
        HourlyProfile([1.0, -0.5])


def test_profile_rejects_non_finite_values():
    with pytest.raises(InvalidProfile, match="finite"):
        HourlyProfile([1.0, float("nan")])


def test_empty_profile_is_allowed():
    profile = HourlyProfile([])
    assert len(profile) == 0
    assert profile.total() == 0.0


def test_indexing_slicing_and_iteration():
    profile = HourlyProfile([0.0, 10.0, 20.0, 30.0])

    assert profile[1] == 10.0
    assert isinstance(profile[1:3], HourlyProfile)
    assert profile[1:3].tolist() == [10.0, 20.0]
    assert list(profile) == [0.0, 10.0, 20.0, 30.0]
    assert profile.hours == 4


def test_equality_uses_tolerance():
    assert HourlyProfile([1.0, 2.0]) == HourlyProfile([1.0, 2.0 + 1e-12])
    assert HourlyProfile([1.0, 2.0]) != HourlyProfile([1.0, 2.001])
    assert HourlyProfile([1.0]) != HourlyProfile([1.0, 1.0])


def test_fingerprint_tracks_content():
    a = HourlyProfile([1.0, 2.0, 3.0])
    b = HourlyProfile(np.array([1.0, 2.0, 3.0]))
    c = HourlyProfile([1.0, 2.0, 4.0])

    assert a.fingerprint == b.fingerprint
    assert a.fingerprint != c.fingerprint
