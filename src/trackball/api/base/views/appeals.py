from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from trackball import mixins as logmixins
from trackball.api.helpers import failure_response
from trackball.api.v1.serializers.appeal import (
    AccountAppealSerializer,
    AppealReviewSerializer,
)
from trackball.permissions import NotUnderMaintenance
from trackball.services.appeals import AppealResponse, review_appeal, submit_appeal
from users.models import AccountAppeal

ERROR_RESPONSE_MAPPING = {
    AppealResponse.FAILED_REASON_NOT_RESTRICTED: {
        "display_code": "appeal_error_not_restricted",
        "error_message": "Only banned or locked accounts can submit an appeal.",
    },
    AppealResponse.FAILED_REASON_APPEAL_PENDING: {
        "display_code": "appeal_error_pending",
        "error_message": "You already have an appeal waiting for review.",
    },
    AppealResponse.FAILED_REASON_INVALID_DECISION: {
        "display_code": "appeal_error_invalid_decision",
        "error_message": "Decision must be approved or rejected.",
    },
    AppealResponse.FAILED_REASON_ALREADY_REVIEWED: {
        "display_code": "appeal_error_already_reviewed",
        "error_message": "This appeal has already been reviewed.",
    },
}


class AppealView(logmixins.LogMixin, ListAPIView):
    # Appeals are the one write a banned or locked account is allowed
    permission_classes = [IsAuthenticated, NotUnderMaintenance]
    serializer_class = AccountAppealSerializer

    def get_queryset(self):
        return AccountAppeal.objects.filter(user=self.request.user)

    def post(self, request, *args, **kwargs):
        serializer = AccountAppealSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        appeal_response = submit_appeal(
            request.user, serializer.validated_data['message']
        )

        if appeal_response.success:
            return Response(
                AccountAppealSerializer(appeal_response.appeal).data,
                status=status.HTTP_201_CREATED,
            )

        return failure_response(appeal_response, ERROR_RESPONSE_MAPPING)


class AppealReviewView(logmixins.LogMixin, APIView):
    permission_classes = [IsAdminUser]
    allowed_methods = ["POST"]

    def post(self, request, *args, **kwargs):
        try:
            appeal = AccountAppeal.objects.get(pk=kwargs['appeal_id'])
        except AccountAppeal.DoesNotExist:
            raise NotFound()

        serializer = AppealReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        appeal_response = review_appeal(
            appeal,
            serializer.validated_data['decision'],
            request.user,
            serializer.validated_data.get('admin_notes'),
        )

        if appeal_response.success:
            return Response(AccountAppealSerializer(appeal_response.appeal).data)

        return failure_response(appeal_response, ERROR_RESPONSE_MAPPING)
