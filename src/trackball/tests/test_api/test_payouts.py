from decimal import Decimal
from unittest import mock

from django.urls import reverse
from rest_framework import status

from payouts.models import PayoutRequest
from payouts.tests.factories import PayoutRequestFactory
from trackball.tests.base import TrackballAPITestCase
from trackball.vendor.stripe.exceptions import StripeError


class PayoutRequestAPITestCase(TrackballAPITestCase):
    def setUp(self):
        self.user = self.login()

    def test_request_payout(self):
        response = self.client.post(reverse('payouts'), {'amount': '20.00'})

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['status'], PayoutRequest.STATUS_PENDING)
        self.assertEqual(PayoutRequest.objects.get().user, self.user)

    def test_request_below_minimum(self):
        response = self.client.post(reverse('payouts'), {'amount': '0.50'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(PayoutRequest.objects.exists())

    def test_list_own_requests(self):
        PayoutRequestFactory(user=self.user)
        PayoutRequestFactory()

        response = self.client.get(reverse('payouts'))

        self.assertEqual(len(response.data), 1)


@mock.patch('trackball.services.payouts.StripeClient')
class AdminPayoutAPITestCase(TrackballAPITestCase):
    def setUp(self):
        self.login_admin()
        self.payout_request = PayoutRequestFactory(amount=Decimal('12.34'))

    def _action_url(self, action):
        return reverse('admin-payout-action', args=[self.payout_request.pk, action])

    def test_approve(self, mock_client_class):
        response = self.client.post(self._action_url('approve'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], PayoutRequest.STATUS_APPROVED)

    def test_pay(self, mock_client_class):
        mock_client_class.return_value.create_payout.return_value = {'id': 'po_9'}

        response = self.client.post(self._action_url('pay'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], PayoutRequest.STATUS_PAID)
        self.assertEqual(response.data['stripe_payout_id'], 'po_9')

    def test_pay_stripe_failure(self, mock_client_class):
        mock_client_class.return_value.create_payout.side_effect = StripeError(
            'Insufficient funds'
        )

        response = self.client.post(self._action_url('pay'))

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.payout_request.refresh_from_db()
        self.assertEqual(self.payout_request.status, PayoutRequest.STATUS_PENDING)

    def test_reject_twice(self, mock_client_class):
        self.client.post(self._action_url('reject'))

        response = self.client.post(self._action_url('reject'))

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertEqual(response.data['display_code'], 'payout_error_not_pending')

    def test_unknown_action(self, mock_client_class):
        response = self.client.post(self._action_url('refund'))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_filter_by_status(self, mock_client_class):
        PayoutRequestFactory(status=PayoutRequest.STATUS_PAID)

        response = self.client.get(reverse('admin-payouts'), {'status': 'pending'})

        self.assertEqual([p['id'] for p in response.data], [self.payout_request.pk])

    def test_balance(self, mock_client_class):
        stripe = mock_client_class.return_value
        stripe.get_balance.return_value = {
            'available': [{'amount': 1000, 'currency': 'cad'}],
            'pending': [],
        }
        stripe.list_payouts.return_value = []

        response = self.client.get(reverse('admin-stripe-balance'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['available_balance'], Decimal('10.00'))
        self.assertEqual(response.data['recent_payouts'], [])
