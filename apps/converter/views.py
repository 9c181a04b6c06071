"""
HTML currency converter page.
"""

from django.shortcuts import render

from apps.converter.application.presenters import (
    INVALID_AMOUNT_MESSAGE,
    NO_RATE_MESSAGE,
    present_conversion,
    swap_currencies,
)
from apps.converter.domain.exceptions import (
    InvalidAmountError,
    NoRateAvailableError,
    UnsupportedCurrencyError,
)
from apps.converter.domain.models import SUPPORTED_CURRENCIES
from apps.converter.domain.services import ExchangeRateService


DEFAULT_FORM = {
    'amount': '1',
    'source_currency': 'PHP',
    'exchanged_currency': 'USD',
}


def converter_view(request):
    """
    Currency converter view.

    GET without an amount: display the form
    GET with an amount: convert and display results
    GET with swap: exchange source and target, then convert
    """
    context = {
        'title': 'Currency Converter',
        'currencies': SUPPORTED_CURRENCIES,
        'form_data': dict(DEFAULT_FORM),
        'result': None,
        'status': '',
        'is_error': False,
    }

    if 'amount' not in request.GET:
        return render(request, 'converter/index.html', context)

    amount_str = request.GET.get('amount', '')
    source_currency_code = request.GET.get('source_currency', DEFAULT_FORM['source_currency']).strip().upper()
    exchanged_currency_code = request.GET.get('exchanged_currency', DEFAULT_FORM['exchanged_currency']).strip().upper()

    if 'swap' in request.GET:
        source_currency_code, exchanged_currency_code = swap_currencies(
            source_currency_code,
            exchanged_currency_code,
        )

    # Store form data to repopulate
    context['form_data'] = {
        'amount': amount_str,
        'source_currency': source_currency_code,
        'exchanged_currency': exchanged_currency_code,
    }

    try:
        result = ExchangeRateService.convert_amount(
            amount_str,
            source_currency_code,
            exchanged_currency_code,
        )
    except InvalidAmountError:
        context.update(status=INVALID_AMOUNT_MESSAGE, is_error=True)
        return render(request, 'converter/index.html', context, status=400)
    except UnsupportedCurrencyError as e:
        context.update(status=str(e), is_error=True)
        return render(request, 'converter/index.html', context, status=400)
    except NoRateAvailableError:
        context.update(status=NO_RATE_MESSAGE, is_error=True)
        return render(request, 'converter/index.html', context, status=503)

    presented = present_conversion(result)
    context.update(
        result=presented,
        status=presented['status'],
        is_error=presented['is_fallback'],
    )
    return render(request, 'converter/index.html', context)
