"""
Serializers for the converter bounded context.
Output only: query parameters are parsed by the domain so amount validation
always runs first.
"""

from rest_framework import serializers


class ConversionResultSerializer(serializers.Serializer):
    source_currency = serializers.CharField()
    exchanged_currency = serializers.CharField()
    amount = serializers.CharField()
    rate = serializers.CharField()
    converted_amount = serializers.CharField()
    provenance = serializers.CharField()
    converted_display = serializers.CharField()
    rate_info = serializers.CharField()
    status = serializers.CharField()
    is_fallback = serializers.BooleanField()


class StaticRateSerializer(serializers.Serializer):
    source_currency = serializers.CharField()
    exchanged_currency = serializers.CharField()
    rate = serializers.DecimalField(max_digits=18, decimal_places=6)


class CurrenciesSerializer(serializers.Serializer):
    currencies = serializers.ListField(child=serializers.CharField())
    pivot_currency = serializers.CharField()
