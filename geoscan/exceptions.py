"""Exceptions raised for invalid caller input.

Provider and suggestion failures never surface here; they degrade to
neutral results where they happen.
"""


class GeoScanError(ValueError):
    """Base class for scan engine input errors."""


class UnknownProviderError(GeoScanError):
    """Raised when a scan names a provider id that is not registered."""

    def __init__(self, provider: str):
        super().__init__(f"Unknown provider: {provider!r}")
        self.provider = provider


class UnknownPlanError(GeoScanError):
    """Raised when a plan name does not match any tier."""


class BenchmarkNotAvailable(GeoScanError):
    """Raised when a competitor benchmark is requested on the free plan."""
