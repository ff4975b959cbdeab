import logging

from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from payouts.models import PayoutRequest
from trackball import mixins as logmixins
from trackball.api.helpers import (
    failure_response,
    service_validation_error,
    stripe_api_exception,
)
from trackball.api.v1.serializers.payout import (
    AdminPayoutRequestSerializer,
    PayoutActionSerializer,
    PayoutRequestSerializer,
)
from trackball.permissions import IsNotRestricted, NotUnderMaintenance
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

logger = logging.getLogger(__name__)

ERROR_RESPONSE_MAPPING = {
    PayoutResponse.FAILED_REASON_NOT_PENDING: {
        "display_code": "payout_error_not_pending",
        "error_message": "Only pending payout requests can be approved or rejected.",
    },
    PayoutResponse.FAILED_REASON_NOT_PAYABLE: {
        "display_code": "payout_error_not_payable",
        "error_message": "Only pending or approved payout requests can be paid.",
    },
}

ACTION_APPROVE = 'approve'
ACTION_REJECT = 'reject'
ACTION_PAY = 'pay'


class PayoutRequestView(logmixins.LogMixin, ListAPIView):
    permission_classes = [IsAuthenticated, NotUnderMaintenance, IsNotRestricted]
    serializer_class = PayoutRequestSerializer

    def get_queryset(self):
        return PayoutRequest.objects.filter(user=self.request.user)

    def post(self, request, *args, **kwargs):
        serializer = PayoutRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            payout_request = request_payout(
                request.user,
                serializer.validated_data['amount'],
                serializer.validated_data.get('notes'),
            )
        except InvalidPayoutError as e:
            raise service_validation_error(e)

        return Response(
            PayoutRequestSerializer(payout_request).data, status=status.HTTP_201_CREATED
        )


class AdminPayoutRequestListView(logmixins.LogMixin, ListAPIView):
    permission_classes = [IsAdminUser]
    serializer_class = AdminPayoutRequestSerializer
    filterset_fields = ['status', 'user']

    def get_queryset(self):
        return PayoutRequest.objects.select_related('user')


class AdminPayoutActionView(logmixins.LogMixin, APIView):
    permission_classes = [IsAdminUser]
    allowed_methods = ["POST"]

    def post(self, request, *args, **kwargs):
        try:
            payout_request = PayoutRequest.objects.get(pk=kwargs['payout_request_id'])
        except PayoutRequest.DoesNotExist:
            raise NotFound()

        serializer = PayoutActionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        action = kwargs['action']
        if action == ACTION_APPROVE:
            payout_response = approve_payout(
                payout_request, serializer.validated_data.get('notes')
            )
        elif action == ACTION_REJECT:
            payout_response = reject_payout(
                payout_request, serializer.validated_data.get('notes')
            )
        elif action == ACTION_PAY:
            try:
                payout_response = pay_payout(
                    payout_request, serializer.validated_data.get('description')
                )
            except StripeError as e:
                raise stripe_api_exception(e)
        else:
            raise NotFound()

        if payout_response.success:
            return Response(
                AdminPayoutRequestSerializer(payout_response.payout_request).data
            )

        return failure_response(payout_response, ERROR_RESPONSE_MAPPING)


class StripeBalanceView(logmixins.LogMixin, APIView):
    permission_classes = [IsAdminUser]
    allowed_methods = ["GET"]

    def get(self, request, *args, **kwargs):
        try:
            return Response(stripe_balance())
        except StripeError as e:
            raise stripe_api_exception(e)
