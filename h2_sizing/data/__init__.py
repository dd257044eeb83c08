from h2_sizing.data.profile import HourlyProfile
from h2_sizing.data.profile_loader import (
    ProfileLoader,
    ProfileParseReport,
    SkippedToken,
    load_default,
    parse,
    serialize,
)

__all__ = [
    'HourlyProfile',
    'ProfileLoader',
    'ProfileParseReport',
    'SkippedToken',
    'load_default',
    'parse',
    'serialize',
]
