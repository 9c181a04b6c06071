"""
Domain errors for the converter bounded context.

Only InvalidAmountError, UnsupportedCurrencyError and NoRateAvailableError
reach callers. The LiveRateError family is absorbed by the fallback chain.
"""


class ConverterError(Exception):
    """Base class for every converter error."""


class InvalidAmountError(ConverterError, ValueError):
    """Amount is missing, unparseable or not finite."""


class UnsupportedCurrencyError(ConverterError, ValueError):
    """Currency code is not one of the supported codes."""


class LiveRateError(ConverterError):
    """Live rate lookup failed."""


class NetworkError(LiveRateError):
    """Transport failure, timeout or non-success HTTP status."""


class MalformedResponseError(LiveRateError):
    """Response body is not JSON or lacks a numeric rate for the target."""


class NoRateAvailableError(ConverterError):

    def __init__(self, source_currency: str, exchanged_currency: str):
        self.source_currency = source_currency
        self.exchanged_currency = exchanged_currency
        super().__init__(
            f"No live or static rate available for {source_currency}/{exchanged_currency}"
        )
