"""Custom exception hierarchy for the hydrogen storage sizing system."""


class H2SizingError(Exception):
    """Base exception for all h2_sizing errors."""
    pass


class ProfileError(H2SizingError):
    """Base exception for hourly generation profile errors."""
    pass


class InvalidProfile(ProfileError):
    """Raised when a profile source is unreadable or holds no usable values."""
    pass


class DataUnavailable(ProfileError):
    """Raised when the bundled reference profile cannot be read."""
    pass


class ConfigurationError(H2SizingError):
    """Raised for configuration loading/validation errors."""
    pass


class InvalidConfig(ConfigurationError):
    """
    Raised when a dispatch configuration field fails validation.

    Attributes:
        field (str): Name of the offending DispatchConfig field.
        reason (str): Human-readable explanation of the violation.
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid configuration for '{field}': {reason}")


class SimulationError(H2SizingError):
    """Raised for simulation execution errors."""
    pass


class ExportError(H2SizingError):
    """Raised when a report, trajectory or profile template cannot be written."""
    pass
