from abc import ABC, abstractmethod
from decimal import Decimal


class BaseExchangeRateProvider(ABC):
    @abstractmethod
    def get_exchange_rate_data(self, source_currency: str, exchanged_currency: str) -> Decimal:
        """
        Return the rate for converting 1 unit of source_currency into exchanged_currency.

        Raises:
            NetworkError: the request could not be completed
            MalformedResponseError: the response carried no usable rate
        """
