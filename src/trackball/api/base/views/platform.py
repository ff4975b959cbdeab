from django.utils import timezone
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from trackball.api.v1.serializers.platform import (
    AnnouncementBarSerializer,
    AnnouncementSerializer,
    MaintenanceSerializer,
)
from trackball.models import Announcement, AnnouncementBar, MaintenanceSettings


class PlatformStatusView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    allowed_methods = ["GET"]

    def get(self, request, *args, **kwargs):
        now = timezone.now()

        announcement_bar = next(
            (
                bar
                for bar in AnnouncementBar.objects.filter(is_active=True)
                if bar.is_in_effect(now)
            ),
            None,
        )
        maintenance = MaintenanceSettings.current(now)

        return Response(
            {
                'announcements': AnnouncementSerializer(
                    Announcement.objects.filter(is_active=True), many=True
                ).data,
                'announcement_bar': AnnouncementBarSerializer(announcement_bar).data
                if announcement_bar
                else None,
                'maintenance': MaintenanceSerializer(maintenance).data
                if maintenance
                else None,
            }
        )
