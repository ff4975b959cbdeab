from decimal import Decimal
from unittest import mock

from django.test import TestCase

from payouts.models import PayoutRequest
from payouts.tests.factories import PayoutRequestFactory
from trackball.services.exceptions import InvalidPayoutError
from trackball.services.payouts import (
    PayoutResponse,
    approve_payout,
    pay_payout,
    reject_payout,
    request_payout,
    stripe_balance,
)
from trackball.vendor.stripe.exceptions import StripeError
from users.tests.factories import UserFactory


class RequestPayoutTestCase(TestCase):
    def test_request_payout(self):
        user = UserFactory()

        payout_request = request_payout(user, '42.50', 'Monthly royalties')

        self.assertEqual(payout_request.amount, Decimal('42.50'))
        self.assertEqual(payout_request.status, PayoutRequest.STATUS_PENDING)

    def test_minimum_amount(self):
        with self.assertRaises(InvalidPayoutError):
            request_payout(UserFactory(), Decimal('0.50'))

        self.assertFalse(PayoutRequest.objects.exists())


class ReviewPayoutTestCase(TestCase):
    def test_approve_and_reject_pending_only(self):
        approved = approve_payout(PayoutRequestFactory(), 'Checked')
        rejected = reject_payout(PayoutRequestFactory())

        self.assertTrue(approved.success)
        self.assertEqual(approved.payout_request.status, PayoutRequest.STATUS_APPROVED)
        self.assertEqual(approved.payout_request.notes, 'Checked')
        self.assertTrue(rejected.success)
        self.assertEqual(rejected.payout_request.status, PayoutRequest.STATUS_REJECTED)

        result = reject_payout(approved.payout_request)

        self.assertFalse(result.success)
        self.assertEqual(result.failure_reason, PayoutResponse.FAILED_REASON_NOT_PENDING)


@mock.patch('trackball.services.payouts.StripeClient')
class PayPayoutTestCase(TestCase):
    def test_pay_sends_stripe_payout(self, mock_client_class):
        stripe = mock_client_class.return_value
        stripe.create_payout.return_value = {'id': 'po_123'}
        payout_request = PayoutRequestFactory(amount=Decimal('25.00'))

        result = pay_payout(payout_request)

        self.assertTrue(result.success)
        self.assertEqual(stripe.create_payout.call_args[0][0], 2500)
        payout_request.refresh_from_db()
        self.assertEqual(payout_request.status, PayoutRequest.STATUS_PAID)
        self.assertEqual(payout_request.stripe_payout_id, 'po_123')
        self.assertEqual(payout_request.notes, 'Stripe Payout ID: po_123')

    def test_paid_request_is_not_paid_twice(self, mock_client_class):
        payout_request = PayoutRequestFactory(status=PayoutRequest.STATUS_PAID)

        result = pay_payout(payout_request)

        self.assertFalse(result.success)
        self.assertEqual(result.failure_reason, PayoutResponse.FAILED_REASON_NOT_PAYABLE)
        mock_client_class.return_value.create_payout.assert_not_called()

    def test_stripe_failure_leaves_request_untouched(self, mock_client_class):
        mock_client_class.return_value.create_payout.side_effect = StripeError(
            'Insufficient funds in Stripe account', status_code=400
        )
        payout_request = PayoutRequestFactory(status=PayoutRequest.STATUS_APPROVED)

        with self.assertRaises(StripeError):
            pay_payout(payout_request)

        payout_request.refresh_from_db()
        self.assertEqual(payout_request.status, PayoutRequest.STATUS_APPROVED)
        self.assertIsNone(payout_request.stripe_payout_id)


@mock.patch('trackball.services.payouts.StripeClient')
class StripeBalanceTestCase(TestCase):
    def test_balance_in_platform_currency(self, mock_client_class):
        stripe = mock_client_class.return_value
        stripe.get_balance.return_value = {
            'available': [
                {'amount': 123456, 'currency': 'cad'},
                {'amount': 999, 'currency': 'usd'},
            ],
            'pending': [{'amount': 500, 'currency': 'cad'}],
        }
        stripe.list_payouts.return_value = [
            {
                'id': 'po_1',
                'amount': 2500,
                'currency': 'cad',
                'status': 'paid',
                'arrival_date': 1700000000,
                'created': 1699900000,
                'description': 'Payout request 1',
            }
        ]

        balance = stripe_balance()

        self.assertEqual(balance['currency'], 'cad')
        self.assertEqual(balance['available_balance'], Decimal('1234.56'))
        self.assertEqual(balance['pending_balance'], Decimal('5.00'))
        self.assertEqual(balance['recent_payouts'][0]['amount'], Decimal('25.00'))
