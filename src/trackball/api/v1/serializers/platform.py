from rest_framework import serializers

from trackball.models import Announcement, AnnouncementBar, MaintenanceSettings


class AnnouncementSerializer(serializers.ModelSerializer):
    class Meta:
        model = Announcement
        fields = ('id', 'title', 'message', 'created')


class AnnouncementBarSerializer(serializers.ModelSerializer):
    class Meta:
        model = AnnouncementBar
        fields = ('id', 'message', 'button_text', 'button_link', 'start_date', 'end_date')


class MaintenanceSerializer(serializers.ModelSerializer):
    class Meta:
        model = MaintenanceSettings
        fields = ('maintenance_type', 'reason', 'start_time', 'end_time')
