"""Exceptions raised by the home risk pipeline.

Every stage raises its own subclass of HomeRiskError so the CLI can report
which step failed. None of them are retried.
"""


class HomeRiskError(Exception):
    """Base class for all pipeline failures."""


class GeocodingFailure(HomeRiskError):
    """The address could not be resolved to a projected coordinate."""


class RequestBuildFailure(HomeRiskError):
    """The risk query URL or its parameters could not be built."""


class TransportFailure(HomeRiskError):
    """The risk query could not be sent or its body could not be read."""


class DecodeFailure(HomeRiskError):
    """The risk query response was not the expected JSON document."""


class UnexpectedResultCount(HomeRiskError):
    """The risk query did not return exactly one feature."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"expected 1 features, but got {count}")
