from rest_framework.exceptions import NotFound
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from trackball import mixins as logmixins
from trackball.api.v1.serializers.notification import NotificationSerializer
from trackball.services.notifications import mark_all_read
from users.models import Notification


class NotificationListView(logmixins.LogMixin, ListAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = NotificationSerializer
    filterset_fields = ['is_read', 'type']

    def get_queryset(self):
        return Notification.objects.filter(user=self.request.user)


class NotificationReadView(logmixins.LogMixin, APIView):
    permission_classes = [IsAuthenticated]
    allowed_methods = ["POST"]

    def post(self, request, *args, **kwargs):
        notification_id = kwargs.get('notification_id')
        if notification_id is None:
            return Response({'updated': mark_all_read(request.user)})

        updated = Notification.objects.filter(
            pk=notification_id, user=request.user
        ).update(is_read=True)
        if not updated:
            raise NotFound()
        return Response({'updated': updated})
