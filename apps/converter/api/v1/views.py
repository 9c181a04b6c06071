"""
ViewSets for the converter API v1.
"""

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.converter.api.v1.serializers import (
    ConversionResultSerializer,
    CurrenciesSerializer,
    StaticRateSerializer,
)
from apps.converter.application.presenters import (
    INVALID_AMOUNT_MESSAGE,
    NO_RATE_MESSAGE,
    present_conversion,
)
from apps.converter.domain.exceptions import (
    InvalidAmountError,
    NoRateAvailableError,
    UnsupportedCurrencyError,
)
from apps.converter.domain.models import PIVOT_CURRENCY, SUPPORTED_CURRENCIES
from apps.converter.domain.services import ExchangeRateService
from apps.converter.domain.static_rates import STATIC_RATE_TABLE


@extend_schema(tags=['Converter'])
class ConverterViewSet(viewsets.ViewSet):

    @extend_schema(
        parameters=[
            OpenApiParameter("amount", OpenApiTypes.DECIMAL, required=True, description="Amount to convert"),
            OpenApiParameter("source_currency", OpenApiTypes.STR, required=True, description="Source currency code (PHP, USD or EUR)"),
            OpenApiParameter("exchanged_currency", OpenApiTypes.STR, required=True, description="Target currency code (PHP, USD or EUR)"),
        ],
        responses=ConversionResultSerializer,
        description="Convert an amount using the live rate, falling back to static rates"
    )
    @action(detail=False, methods=['get'], url_path='convert')
    def convert(self, request):
        """
        Convert an amount from one currency to another.
        """
        amount_str = request.query_params.get('amount')
        source_currency_code = request.query_params.get('source_currency')
        exchanged_currency_code = request.query_params.get('exchanged_currency')

        if not all([source_currency_code, exchanged_currency_code]):
            return Response(
                {"error": "source_currency and exchanged_currency are required"},
                status=status.HTTP_400_BAD_REQUEST
            )

        try:
            result = ExchangeRateService.convert_amount(
                amount_str,
                source_currency_code.strip().upper(),
                exchanged_currency_code.strip().upper(),
            )
        except InvalidAmountError:
            return Response(
                {"error": INVALID_AMOUNT_MESSAGE},
                status=status.HTTP_400_BAD_REQUEST
            )
        except UnsupportedCurrencyError as e:
            return Response(
                {"error": str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )
        except NoRateAvailableError as e:
            return Response(
                {
                    "error": NO_RATE_MESSAGE,
                    "source_currency": e.source_currency,
                    "exchanged_currency": e.exchanged_currency,
                },
                status=status.HTTP_503_SERVICE_UNAVAILABLE
            )

        return Response(ConversionResultSerializer(present_conversion(result)).data)

    @extend_schema(
        responses=StaticRateSerializer(many=True),
        description="List the static fallback rates"
    )
    @action(detail=False, methods=['get'], url_path='static')
    def static(self, request):
        entries = [
            {
                "source_currency": source_currency,
                "exchanged_currency": exchanged_currency,
                "rate": rate_value,
            }
            for source_currency, exchanged_currency, rate_value in STATIC_RATE_TABLE.pairs()
        ]
        return Response(StaticRateSerializer(entries, many=True).data)

    @extend_schema(responses=CurrenciesSerializer, description="List supported currencies")
    @action(detail=False, methods=['get'], url_path='currencies')
    def currencies(self, request):
        return Response(CurrenciesSerializer({
            "currencies": list(SUPPORTED_CURRENCIES),
            "pivot_currency": PIVOT_CURRENCY,
        }).data)
