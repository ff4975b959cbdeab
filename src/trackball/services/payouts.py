import logging
from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.db import transaction

from payouts.models import PayoutRequest
from trackball.services.exceptions import InvalidPayoutError
from trackball.utils import from_cents, to_cents
from trackball.vendor.stripe.client import StripeClient

logger = logging.getLogger(__name__)


class PayoutResponse:
    FAILED_REASON_NOT_PENDING = "not_pending"
    FAILED_REASON_NOT_PAYABLE = "not_payable"

    def __init__(self, success, error_reason=None, payout_request=None):
        self.success = success
        self.failure_reason = error_reason
        self.payout_request = payout_request


def request_payout(user, amount, notes=None):
    try:
        amount = Decimal(str(amount))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidPayoutError('Amount must be a number')

    if amount < settings.PAYOUT_MIN_AMOUNT:
        raise InvalidPayoutError(
            'Amount must be at least %s' % settings.PAYOUT_MIN_AMOUNT
        )

    payout_request = PayoutRequest.objects.create(user=user, amount=amount, notes=notes)
    logger.info('Payout request %s for %s by user %s', payout_request.pk, amount, user.pk)
    return payout_request


def _transition(payout_request, new_status, notes=None):
    with transaction.atomic():
        payout_request = PayoutRequest.objects.select_for_update().get(
            pk=payout_request.pk
        )
        if payout_request.status != PayoutRequest.STATUS_PENDING:
            return PayoutResponse(
                False, PayoutResponse.FAILED_REASON_NOT_PENDING, payout_request
            )

        payout_request.status = new_status
        if notes:
            payout_request.notes = notes
        payout_request.save()

    logger.info('Payout request %s %s', payout_request.pk, new_status)
    return PayoutResponse(True, payout_request=payout_request)


def approve_payout(payout_request, notes=None):
    return _transition(payout_request, PayoutRequest.STATUS_APPROVED, notes)


def reject_payout(payout_request, notes=None):
    return _transition(payout_request, PayoutRequest.STATUS_REJECTED, notes)


def pay_payout(payout_request, description=None):
    """
    Sends the requested amount through a Stripe payout. A Stripe failure
    raises StripeError and leaves the request untouched.
    """
    with transaction.atomic():
        payout_request = PayoutRequest.objects.select_for_update().get(
            pk=payout_request.pk
        )
        if not payout_request.is_payable:
            return PayoutResponse(
                False, PayoutResponse.FAILED_REASON_NOT_PAYABLE, payout_request
            )

        payout = StripeClient().create_payout(
            to_cents(payout_request.amount),
            description=description or 'Payout request %s' % payout_request.pk,
            metadata={
                'payout_request_id': payout_request.pk,
                'user_id': payout_request.user_id,
            },
        )

        payout_request.status = PayoutRequest.STATUS_PAID
        payout_request.stripe_payout_id = payout['id']
        payout_request.notes = 'Stripe Payout ID: %s' % payout['id']
        payout_request.save()

    logger.info(
        'Payout request %s paid with Stripe payout %s', payout_request.pk, payout['id']
    )
    return PayoutResponse(True, payout_request=payout_request)


def _sum_currency(entries, currency):
    return sum(entry['amount'] for entry in entries if entry['currency'] == currency)


def stripe_balance():
    client = StripeClient()
    balance = client.get_balance()
    payouts = client.list_payouts()
    currency = settings.STRIPE_CURRENCY

    return {
        'currency': currency,
        'available_balance': from_cents(_sum_currency(balance['available'], currency)),
        'pending_balance': from_cents(_sum_currency(balance['pending'], currency)),
        'recent_payouts': [
            {
                'id': payout['id'],
                'amount': from_cents(payout['amount']),
                'currency': payout['currency'],
                'status': payout['status'],
                'arrival_date': payout.get('arrival_date'),
                'created': payout['created'],
                'description': payout.get('description'),
            }
            for payout in payouts
        ],
    }
