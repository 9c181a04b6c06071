"""
Domain services - Core business logic.
Implements the live-then-static fallback chain for exchange rates.
"""

import logging
from decimal import Decimal

from apps.converter.domain.exceptions import LiveRateError, NetworkError, NoRateAvailableError
from apps.converter.domain.models import (
    PIVOT_CURRENCY,
    ConversionRequest,
    ConversionResult,
    Provenance,
    ResolvedRate,
    parse_amount,
)
from apps.converter.domain.static_rates import STATIC_RATE_TABLE, StaticRateTable
from apps.converter.infrastructure.providers.registry import get_live_provider


logger = logging.getLogger(__name__)


class ExchangeRateService:
    """
    Domain service that resolves exchange rates with a fallback mechanism.

    Fallback strategy:
    1. Same currency: rate is 1, nothing is fetched
    2. Ask the live provider (one request, no retries)
    3. If it fails, use the direct static rate
    4. If there is none, pivot through USD in the static table
    5. Raise NoRateAvailableError if nothing matched
    """

    @staticmethod
    def get_exchange_rate(
        source_currency_code: str,
        exchanged_currency_code: str,
        static_table: StaticRateTable | None = None
    ) -> ResolvedRate:
        """
        Resolve the rate for converting 1 unit of source into target.

        Args:
            source_currency_code: Base currency (e.g. "PHP")
            exchanged_currency_code: Target currency (e.g. "USD")
            static_table: Fallback table, defaults to STATIC_RATE_TABLE

        Returns:
            ResolvedRate with the multiplier and its provenance

        Raises:
            NoRateAvailableError: live lookup failed and no static rate exists

        Example:
            >>> resolved = ExchangeRateService.get_exchange_rate("PHP", "USD")
            >>> resolved.provenance
            <Provenance.LIVE: 'live'>
        """
        if source_currency_code == exchanged_currency_code:
            logger.debug("Identical currencies %s, rate is 1", source_currency_code)
            return ResolvedRate(rate=Decimal("1"), provenance=Provenance.IDENTICAL)

        try:
            rate = ExchangeRateService._fetch_live_rate(source_currency_code, exchanged_currency_code)
        except LiveRateError as e:
            logger.warning(
                "Live rate unavailable for %s/%s, using static rates: %s",
                source_currency_code,
                exchanged_currency_code,
                e,
            )
        else:
            logger.debug("Live rate for %s/%s: %s", source_currency_code, exchanged_currency_code, rate)
            return ResolvedRate(rate=rate, provenance=Provenance.LIVE)

        return ExchangeRateService._resolve_static_rate(
            source_currency_code,
            exchanged_currency_code,
            static_table if static_table is not None else STATIC_RATE_TABLE,
        )

    @staticmethod
    def _fetch_live_rate(source_currency_code: str, exchanged_currency_code: str) -> Decimal:
        provider = get_live_provider()

        if provider is None:
            raise NetworkError("No live rate provider configured")

        return provider.get_exchange_rate_data(source_currency_code, exchanged_currency_code)

    @staticmethod
    def _resolve_static_rate(
        source_currency_code: str,
        exchanged_currency_code: str,
        static_table: StaticRateTable
    ) -> ResolvedRate:
        direct_rate = static_table.lookup_direct(source_currency_code, exchanged_currency_code)
        if direct_rate is not None:
            logger.debug("Static rate for %s/%s: %s", source_currency_code, exchanged_currency_code, direct_rate)
            return ResolvedRate(rate=direct_rate, provenance=Provenance.STATIC_DIRECT)

        to_pivot = static_table.lookup_direct(source_currency_code, PIVOT_CURRENCY)
        from_pivot = static_table.lookup_direct(PIVOT_CURRENCY, exchanged_currency_code)
        if to_pivot is not None and from_pivot is not None:
            pivoted_rate = to_pivot * from_pivot
            logger.debug(
                "Static rate for %s/%s via %s: %s",
                source_currency_code,
                exchanged_currency_code,
                PIVOT_CURRENCY,
                pivoted_rate,
            )
            return ResolvedRate(rate=pivoted_rate, provenance=Provenance.STATIC_PIVOTED)

        logger.warning("No fallback rate for %s/%s", source_currency_code, exchanged_currency_code)
        raise NoRateAvailableError(source_currency_code, exchanged_currency_code)

    @staticmethod
    def convert_amount(
        amount,
        source_currency_code: str,
        exchanged_currency_code: str,
        static_table: StaticRateTable | None = None
    ) -> ConversionResult:
        """
        Convert an amount from one currency to another.

        The amount is validated before anything else, so an invalid amount never
        triggers a rate lookup.

        Args:
            amount: Amount to convert (Decimal, int, float or numeric string)
            source_currency_code: Source currency
            exchanged_currency_code: Target currency
            static_table: Fallback table, defaults to STATIC_RATE_TABLE

        Returns:
            ConversionResult; converted_amount is not rounded

        Raises:
            InvalidAmountError: amount is missing, unparseable or not finite
            UnsupportedCurrencyError: a code is not PHP, USD or EUR
            NoRateAvailableError: no live or static rate for the pair

        Example:
            >>> result = ExchangeRateService.convert_amount("10", "USD", "USD")
            >>> result.converted_amount, result.provenance
            (Decimal('10'), <Provenance.IDENTICAL: 'identical'>)
        """
        request = ConversionRequest(
            amount=parse_amount(amount),
            source_currency=source_currency_code,
            exchanged_currency=exchanged_currency_code,
        )

        resolved = ExchangeRateService.get_exchange_rate(
            request.source_currency,
            request.exchanged_currency,
            static_table,
        )

        return ConversionResult(
            source_currency=request.source_currency,
            exchanged_currency=request.exchanged_currency,
            amount=request.amount,
            rate=resolved.rate,
            converted_amount=request.amount * resolved.rate,
            provenance=resolved.provenance,
        )
