from rest_framework import serializers

from trackball.models import SupportTicket, TicketMessage


class TicketMessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = TicketMessage
        fields = ('id', 'user_id', 'message', 'is_admin_reply', 'created')
        read_only_fields = ('user_id', 'is_admin_reply', 'created')


class SupportTicketSerializer(serializers.ModelSerializer):
    messages = TicketMessageSerializer(many=True, read_only=True)

    class Meta:
        model = SupportTicket
        fields = (
            'id',
            'subject',
            'description',
            'category',
            'priority',
            'status',
            'messages',
            'created',
            'updated',
        )
        read_only_fields = ('status', 'messages', 'created', 'updated')


class TicketReplySerializer(serializers.Serializer):
    message = serializers.CharField()
    status = serializers.ChoiceField(
        choices=SupportTicket.STATUS_CHOICES, required=False
    )
    escalation_email = serializers.EmailField(required=False, allow_blank=True)
