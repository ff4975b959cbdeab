import logging

from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from releases.models import Release
from trackball import mixins as logmixins
from trackball.api.helpers import failure_response
from trackball.api.v1.serializers.release import (
    AdminReleaseSerializer,
    TakedownReviewSerializer,
)
from trackball.permissions import IsNotRestricted, NotUnderMaintenance
from trackball.services.takedown import (
    TakedownResponse,
    process_takedown,
    request_takedown,
)

logger = logging.getLogger(__name__)

DISPLAY_CODE_ERROR_GENERIC = "takedown_error_generic"
DISPLAY_CODE_ERROR_TAKEDOWN_IN_PROGRESS = "takedown_error_in_progress"
DISPLAY_CODE_ERROR_NOT_OWNER = "takedown_error_not_owner"
DISPLAY_CODE_ERROR_NO_REQUEST = "takedown_error_no_request"

ERROR_RESPONSE_MAPPING = {
    TakedownResponse.FAILED_REASON_NOT_LIVE: {
        "display_code": DISPLAY_CODE_ERROR_GENERIC,
        "error_message": "Cannot take down a release that is not live.",
    },
    TakedownResponse.FAILED_REASON_TAKEDOWN_IN_PROGRESS: {
        "display_code": DISPLAY_CODE_ERROR_TAKEDOWN_IN_PROGRESS,
        "error_message": "A takedown has already been requested for this release.",
    },
    TakedownResponse.FAILED_REASON_NOT_OWNER: {
        "display_code": DISPLAY_CODE_ERROR_NOT_OWNER,
        "error_message": "Only the owner of a release can request a takedown.",
    },
    TakedownResponse.FAILED_REASON_NO_TAKEDOWN_REQUESTED: {
        "display_code": DISPLAY_CODE_ERROR_NO_REQUEST,
        "error_message": "No takedown has been requested for this release.",
    },
}


def _get_release(release_id):
    try:
        return Release.objects.get(pk=release_id)
    except Release.DoesNotExist:
        raise NotFound()


class TakedownView(logmixins.LogMixin, APIView):
    permission_classes = [IsAuthenticated, NotUnderMaintenance, IsNotRestricted]
    allowed_methods = ["POST"]

    def post(self, request, *args, **kwargs):
        release = _get_release(kwargs['release_id'])

        takedown_response = request_takedown(release, request.user)

        if takedown_response.success:
            return Response(status=status.HTTP_204_NO_CONTENT)

        return failure_response(takedown_response, ERROR_RESPONSE_MAPPING)


class TakedownRequestListView(logmixins.LogMixin, ListAPIView):
    permission_classes = [IsAdminUser]
    serializer_class = AdminReleaseSerializer

    def get_queryset(self):
        return Release.objects.takedown_requested().select_related('user')


class TakedownReviewView(logmixins.LogMixin, APIView):
    permission_classes = [IsAdminUser]
    allowed_methods = ["POST"]

    def post(self, request, *args, **kwargs):
        release = _get_release(kwargs['release_id'])

        serializer = TakedownReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        takedown_response = process_takedown(
            release,
            serializer.validated_data['approved'],
            serializer.validated_data.get('admin_notes'),
        )

        if takedown_response.success:
            release.refresh_from_db()
            return Response(AdminReleaseSerializer(release).data)

        return failure_response(takedown_response, ERROR_RESPONSE_MAPPING)
