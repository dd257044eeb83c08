"""
Sizing constants and workbook defaults.

Volumes are in NM3 (normal cubic metres), rates in NM3/h and costs in the
contract currency of the sizing study.
"""

# ============================================================================
# TIME
# ============================================================================

HOURS_PER_DAY = 24
HOURS_PER_YEAR = 8760            # Canonical horizon, one non-leap year

# ============================================================================
# REFERENCE PROFILE
# ============================================================================

BASE_STACK_CAPACITY = 350.0      # NM3/h, stack size the bundled profile was normalized against
DEFAULT_PROFILE_FILENAME = "base_profile.csv"
TEMPLATE_FILENAME = "hourly-profile-template.csv"

# ============================================================================
# DISPATCH / STORAGE DEFAULTS (reference sizing workbook)
# ============================================================================

INSTALLED_CAPACITY = 11000.0     # NM3/h, installed stack size
STOCK_HIGH_THRESHOLD = 80000.0   # NM3, stock above which the high rate is dispatched
SUPPLY_RATE_HIGH = 7649.125      # NM3/h
SUPPLY_RATE_LOW = 6258.375       # NM3/h, base contracted supply rate
STORAGE_CAPACITY = 100000.0      # NM3, total storage volume
CYLINDER_CAPACITY = 26.0         # NM3 per cylinder at 200 bar
CYLINDER_COST_PER_UNIT = 32500.0 # cost per cylinder

# ============================================================================
# NUMERICS
# ============================================================================

PROFILE_TOLERANCE = 1e-9         # Element-wise tolerance for profile equality
