from rest_framework import serializers

from payouts.models import PayoutRequest


class PayoutRequestSerializer(serializers.ModelSerializer):
    class Meta:
        model = PayoutRequest
        fields = ('id', 'amount', 'status', 'notes', 'created', 'updated')
        read_only_fields = ('status', 'created', 'updated')


class AdminPayoutRequestSerializer(serializers.ModelSerializer):
    user_email = serializers.EmailField(source='user.email', read_only=True)

    class Meta:
        model = PayoutRequest
        fields = (
            'id',
            'user_id',
            'user_email',
            'amount',
            'status',
            'notes',
            'stripe_payout_id',
            'created',
            'updated',
        )
        read_only_fields = fields


class PayoutActionSerializer(serializers.Serializer):
    notes = serializers.CharField(required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
