import logging

from django_filters import rest_framework as filters
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from releases.filtersets import ReleaseFilterSet
from releases.models import Release
from trackball import mixins as logmixins
from trackball.api.helpers import failure_response
from trackball.api.v1.serializers.release import (
    AdminReleaseSerializer,
    ReleaseSerializer,
    ReleaseStatusUpdateSerializer,
)
from trackball.permissions import IsNotRestricted, NotUnderMaintenance
from trackball.services.release_deletion import (
    ReleaseDeletionResponse,
    archive_release,
    delete_release,
    restore_release,
)
from trackball.services.release_status import (
    ReleaseStatusResponse,
    update_release_status,
)

logger = logging.getLogger(__name__)

DISPLAY_CODE_ERROR_NOT_DELETABLE = "release_error_not_deletable"
DISPLAY_CODE_ERROR_NOT_ARCHIVED = "release_error_not_archived"
DISPLAY_CODE_ERROR_ALREADY_ARCHIVED = "release_error_already_archived"
DISPLAY_CODE_ERROR_INVALID_STATUS = "release_error_invalid_status"
DISPLAY_CODE_ERROR_STATUS_UNCHANGED = "release_error_status_unchanged"

DELETE_ERROR_RESPONSE_MAPPING = {
    ReleaseDeletionResponse.FAILED_REASON_NOT_DELETABLE: {
        "display_code": DISPLAY_CODE_ERROR_NOT_DELETABLE,
        "error_message": "Cannot delete a release that is pending, live or being "
        "delivered. Request a takedown first.",
    },
    ReleaseDeletionResponse.FAILED_REASON_NOT_OWNER: {
        "display_code": DISPLAY_CODE_ERROR_NOT_DELETABLE,
        "error_message": "Only the owner of a release can delete it.",
    },
    ReleaseDeletionResponse.FAILED_REASON_NOT_ARCHIVED: {
        "display_code": DISPLAY_CODE_ERROR_NOT_ARCHIVED,
        "error_message": "Archive the release before deleting it.",
    },
    ReleaseDeletionResponse.FAILED_REASON_ALREADY_ARCHIVED: {
        "display_code": DISPLAY_CODE_ERROR_ALREADY_ARCHIVED,
        "error_message": "The release is already archived.",
    },
}

ARCHIVE_ERROR_RESPONSE_MAPPING = {
    **DELETE_ERROR_RESPONSE_MAPPING,
    ReleaseDeletionResponse.FAILED_REASON_NOT_ARCHIVED: {
        "display_code": DISPLAY_CODE_ERROR_NOT_ARCHIVED,
        "error_message": "The release is not archived.",
    },
}

STATUS_ERROR_RESPONSE_MAPPING = {
    ReleaseStatusResponse.FAILED_REASON_INVALID_STATUS: {
        "display_code": DISPLAY_CODE_ERROR_INVALID_STATUS,
        "error_message": "Unknown release status.",
    },
    ReleaseStatusResponse.FAILED_REASON_INVALID_PAYMENT_STATUS: {
        "display_code": DISPLAY_CODE_ERROR_INVALID_STATUS,
        "error_message": "Unknown payment status.",
    },
    ReleaseStatusResponse.FAILED_REASON_STATUS_UNCHANGED: {
        "display_code": DISPLAY_CODE_ERROR_STATUS_UNCHANGED,
        "error_message": "The release already has this status.",
    },
    ReleaseStatusResponse.FAILED_REASON_NOTHING_TO_UPDATE: {
        "display_code": DISPLAY_CODE_ERROR_STATUS_UNCHANGED,
        "error_message": "Nothing to update.",
    },
}


class ReleaseViewSet(
    logmixins.LogMixin,
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    permission_classes = (IsAuthenticated,)
    serializer_class = ReleaseSerializer
    filter_backends = (filters.DjangoFilterBackend,)
    filterset_class = ReleaseFilterSet

    def get_permissions(self):
        if self.action not in ['list', 'retrieve']:
            self.permission_classes = self.permission_classes + (
                NotUnderMaintenance,
                IsNotRestricted,
            )
        return [permission() for permission in self.permission_classes]

    def get_queryset(self):
        return Release.objects.owned_by(self.request.user)

    def perform_create(self, serializer):
        serializer.save(user=self.request.user)

    def destroy(self, request, *args, **kwargs):
        release = self.get_object()
        deletion_response = delete_release(release, request.user)

        if deletion_response.success:
            return Response(status=status.HTTP_204_NO_CONTENT)

        return failure_response(deletion_response, DELETE_ERROR_RESPONSE_MAPPING)

    @action(detail=True, methods=["post"])
    def archive(self, request, *args, **kwargs):
        return self._archive_response(archive_release(self.get_object(), request.user))

    @action(detail=True, methods=["post"])
    def restore(self, request, *args, **kwargs):
        return self._archive_response(restore_release(self.get_object(), request.user))

    def _archive_response(self, archive_response):
        if archive_response.success:
            return Response(self.get_serializer(archive_response.release).data)

        return failure_response(archive_response, ARCHIVE_ERROR_RESPONSE_MAPPING)


class AdminReleaseViewSet(
    logmixins.LogMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    permission_classes = (IsAdminUser,)
    serializer_class = AdminReleaseSerializer
    queryset = Release.objects.select_related('user')
    filter_backends = (filters.DjangoFilterBackend,)
    filterset_class = ReleaseFilterSet


class ReleaseStatusView(logmixins.LogMixin, APIView):
    permission_classes = [IsAdminUser]
    allowed_methods = ["POST"]

    def post(self, request, *args, **kwargs):
        serializer = ReleaseStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        status_response = update_release_status(
            kwargs['release_id'],
            new_status=serializer.validated_data.get('status'),
            payment_status=serializer.validated_data.get('payment_status'),
            rejection_reason=serializer.validated_data.get('rejection_reason'),
        )

        if status_response.success:
            return Response(AdminReleaseSerializer(status_response.release).data)

        if (
            status_response.failure_reason
            == ReleaseStatusResponse.FAILED_REASON_NOT_FOUND
        ):
            raise NotFound()

        return failure_response(
            status_response, STATUS_ERROR_RESPONSE_MAPPING, status.HTTP_400_BAD_REQUEST
        )
