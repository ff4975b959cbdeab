import logging
from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from trackball.services.exceptions import InvalidFineError
from trackball.utils import to_cents
from trackball.vendor.stripe.client import StripeClient
from users.models import Fine, User

logger = logging.getLogger(__name__)

FINE_TYPES = frozenset(fine_type for fine_type, _ in Fine.TYPE_CHOICES)


class FinePaymentResponse:
    FAILED_REASON_NO_PENDING_FINES = "no_pending_fines"
    FAILED_REASON_PAYMENT_METHOD_REQUIRED = "payment_method_required"
    FAILED_REASON_NO_CUSTOMER = "no_customer"
    FAILED_REASON_PAYMENT_METHOD_MISMATCH = "payment_method_mismatch"
    FAILED_REASON_PAYMENT_FAILED = "payment_failed"

    def __init__(self, success, error_reason=None, fines=None, payment_intent_id=None):
        self.success = success
        self.failure_reason = error_reason
        self.fines = fines or []
        self.payment_intent_id = payment_intent_id


def _clean_amount(amount):
    try:
        amount = Decimal(str(amount))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidFineError('Amount must be a number')
    if amount <= 0:
        raise InvalidFineError('Amount must be greater than zero')
    return amount


def issue_fine(
    user_id, amount, fine_type, reason, is_mock=False, issued_by=None, notes=None
):
    """
    Issues a fine and counts a strike for it.

    Mock fines carry strike number 0 and leave the strike count alone. The
    real fine that reaches the strike limit is followed by a suspension
    penalty fine. The user row is locked while counting so that concurrent
    fines get consecutive strike numbers.

    Returns a list with the issued fine, followed by the penalty fine when
    one was added.
    """
    amount = _clean_amount(amount)
    if fine_type not in FINE_TYPES:
        raise InvalidFineError('Unknown fine type %s' % fine_type)
    if not reason:
        raise InvalidFineError('A reason is required')

    with transaction.atomic():
        user = User.objects.select_for_update().get(pk=user_id)

        strike_number = 0 if is_mock else user.strike_count + 1

        if not is_mock:
            user.strike_count = strike_number
            user.save(update_fields=['strike_count', 'updated'])

        fines = [
            Fine.objects.create(
                user=user,
                amount=amount,
                fine_type=fine_type,
                reason=reason,
                strike_number=strike_number,
                status=Fine.STATUS_PENDING,
                is_mock=is_mock,
                notes=notes,
                issued_by=issued_by,
            )
        ]

        if not is_mock and strike_number >= settings.STRIKE_LIMIT:
            fines.append(
                Fine.objects.create(
                    user=user,
                    amount=settings.STRIKE_PENALTY_AMOUNT,
                    fine_type=Fine.TYPE_OTHER,
                    reason=settings.STRIKE_PENALTY_REASON,
                    strike_number=settings.STRIKE_LIMIT,
                    status=Fine.STATUS_PENDING,
                    notes=settings.STRIKE_PENALTY_NOTES,
                    issued_by=issued_by,
                )
            )

    logger.info(
        'Fine issued to user %s: amount=%s type=%s strike=%s mock=%s penalty=%s',
        user.pk,
        amount,
        fine_type,
        strike_number,
        is_mock,
        len(fines) > 1,
    )
    return fines


def pay_fines(user, payment_method_id=None):
    """
    Charges the real pending fines of the user to a saved card and marks every
    pending fine paid. Mock fines are acknowledged without being charged.

    The user row stays locked until the fines are marked, so a second request
    waits and then finds nothing left to pay. The charge carries an
    idempotency key built from the fines and the card.
    """
    with transaction.atomic():
        User.objects.select_for_update().get(pk=user.pk)
        pending = list(Fine.objects.select_for_update().filter(user=user).pending())
        if not pending:
            return FinePaymentResponse(
                False, FinePaymentResponse.FAILED_REASON_NO_PENDING_FINES
            )

        billable = [fine for fine in pending if not fine.is_mock]
        payment_intent_id = None

        if billable:
            if not payment_method_id:
                return FinePaymentResponse(
                    False, FinePaymentResponse.FAILED_REASON_PAYMENT_METHOD_REQUIRED
                )

            client = StripeClient()
            customer = client.find_customer(user.email)
            if customer is None:
                return FinePaymentResponse(
                    False, FinePaymentResponse.FAILED_REASON_NO_CUSTOMER
                )

            payment_method = client.get_payment_method(payment_method_id)
            if payment_method.get('customer') != customer['id']:
                return FinePaymentResponse(
                    False, FinePaymentResponse.FAILED_REASON_PAYMENT_METHOD_MISMATCH
                )

            total = sum((fine.amount for fine in billable), Decimal('0'))
            fine_ids = '-'.join(str(pk) for pk in sorted(fine.pk for fine in billable))
            payment_intent = client.charge_payment_method(
                customer['id'],
                payment_method_id,
                to_cents(total),
                'Fine payment - %s' % ', '.join(fine.fine_type for fine in billable),
                metadata={
                    'user_id': user.pk,
                    'type': 'fine',
                    'fine_ids': ','.join(str(fine.pk) for fine in billable),
                },
                idempotency_key='fines-%s-%s-%s'
                % (user.pk, fine_ids, payment_method_id),
            )
            payment_intent_id = payment_intent['id']

            if payment_intent.get('status') != 'succeeded':
                logger.warning(
                    'Fine payment for user %s ended in status %s',
                    user.pk,
                    payment_intent.get('status'),
                )
                return FinePaymentResponse(
                    False,
                    FinePaymentResponse.FAILED_REASON_PAYMENT_FAILED,
                    payment_intent_id=payment_intent_id,
                )

        Fine.objects.filter(pk__in=[fine.pk for fine in pending]).update(
            status=Fine.STATUS_PAID, paid_at=timezone.now()
        )

    logger.info(
        'User %s paid %s fines, %s charged', user.pk, len(pending), len(billable)
    )
    return FinePaymentResponse(
        True, fines=pending, payment_intent_id=payment_intent_id
    )


def cancel_fines(user):
    """Declining to pay pending fines locks the account for a week."""
    with transaction.atomic():
        cancelled = Fine.objects.filter(user=user).pending().update(
            status=Fine.STATUS_CANCELLED, cancelled_at=timezone.now()
        )
        if cancelled:
            user.lock(settings.UNPAID_FINE_LOCK_DAYS)

    logger.info('User %s cancelled %s fines', user.pk, cancelled)
    return cancelled
