import logging

from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from trackball import mixins as logmixins
from trackball.api.helpers import (
    failure_response,
    service_validation_error,
    stripe_api_exception,
)
from trackball.api.v1.serializers.fine import (
    FineSerializer,
    IssueFineSerializer,
    PayFinesSerializer,
)
from trackball.permissions import NotUnderMaintenance
from trackball.services.exceptions import InvalidFineError
from trackball.services.fines import (
    FinePaymentResponse,
    cancel_fines,
    issue_fine,
    pay_fines,
)
from trackball.vendor.stripe.exceptions import StripeError
from users.models import Fine, User

logger = logging.getLogger(__name__)

DISPLAY_CODE_ERROR_PAYMENT = "fine_error_payment"

ERROR_RESPONSE_MAPPING = {
    FinePaymentResponse.FAILED_REASON_NO_PENDING_FINES: {
        "display_code": "fine_error_nothing_to_pay",
        "error_message": "There are no pending fines to pay.",
    },
    FinePaymentResponse.FAILED_REASON_PAYMENT_METHOD_REQUIRED: {
        "display_code": DISPLAY_CODE_ERROR_PAYMENT,
        "error_message": "A payment method is required to pay fines.",
    },
    FinePaymentResponse.FAILED_REASON_NO_CUSTOMER: {
        "display_code": DISPLAY_CODE_ERROR_PAYMENT,
        "error_message": "No payment methods on file. Please add a card first.",
    },
    FinePaymentResponse.FAILED_REASON_PAYMENT_METHOD_MISMATCH: {
        "display_code": DISPLAY_CODE_ERROR_PAYMENT,
        "error_message": "Payment method does not belong to this customer.",
    },
    FinePaymentResponse.FAILED_REASON_PAYMENT_FAILED: {
        "display_code": DISPLAY_CODE_ERROR_PAYMENT,
        "error_message": "The payment could not be completed.",
    },
}


class FineListView(logmixins.LogMixin, ListAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = FineSerializer

    def get_queryset(self):
        return Fine.objects.filter(user=self.request.user)


class PayFinesView(logmixins.LogMixin, APIView):
    # Restricted accounts have to be able to settle their fines
    permission_classes = [IsAuthenticated, NotUnderMaintenance]
    allowed_methods = ["POST"]

    def post(self, request, *args, **kwargs):
        serializer = PayFinesSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            payment_response = pay_fines(
                request.user, serializer.validated_data.get('payment_method_id')
            )
        except StripeError as e:
            raise stripe_api_exception(e)

        if payment_response.success:
            return Response(FineSerializer(payment_response.fines, many=True).data)

        return failure_response(
            payment_response, ERROR_RESPONSE_MAPPING, status.HTTP_400_BAD_REQUEST
        )


class CancelFinesView(logmixins.LogMixin, APIView):
    permission_classes = [IsAuthenticated, NotUnderMaintenance]
    allowed_methods = ["POST"]

    def post(self, request, *args, **kwargs):
        cancelled = cancel_fines(request.user)
        return Response(
            {'cancelled': cancelled, 'locked_until': request.user.locked_until}
        )


class IssueFineView(logmixins.LogMixin, APIView):
    permission_classes = [IsAdminUser]
    allowed_methods = ["POST"]

    def post(self, request, *args, **kwargs):
        serializer = IssueFineSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            fines = issue_fine(
                data['user_id'],
                data['amount'],
                data['fine_type'],
                data['reason'],
                is_mock=data['is_mock'],
                issued_by=request.user,
                notes=data.get('notes'),
            )
        except User.DoesNotExist:
            raise NotFound('User not found')
        except InvalidFineError as e:
            raise service_validation_error(e)

        return Response(
            FineSerializer(fines, many=True).data, status=status.HTTP_201_CREATED
        )
