from decimal import Decimal

from rest_framework import serializers

from users.models import Fine


class FineSerializer(serializers.ModelSerializer):
    class Meta:
        model = Fine
        fields = (
            'id',
            'amount',
            'fine_type',
            'reason',
            'strike_number',
            'status',
            'is_mock',
            'paid_at',
            'cancelled_at',
            'created',
        )
        read_only_fields = fields


class IssueFineSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()
    amount = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal('0.01')
    )
    fine_type = serializers.ChoiceField(choices=Fine.TYPE_CHOICES)
    reason = serializers.CharField()
    is_mock = serializers.BooleanField(default=False)
    notes = serializers.CharField(required=False, allow_blank=True)


class PayFinesSerializer(serializers.Serializer):
    payment_method_id = serializers.CharField(required=False, allow_blank=True)
