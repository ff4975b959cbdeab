from rest_framework import serializers

from users.models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Notification
        fields = ('id', 'title', 'message', 'type', 'is_read', 'created')
        read_only_fields = ('title', 'message', 'type', 'created')
