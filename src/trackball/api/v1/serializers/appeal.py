from rest_framework import serializers

from users.models import AccountAppeal


class AccountAppealSerializer(serializers.ModelSerializer):
    class Meta:
        model = AccountAppeal
        fields = ('id', 'message', 'status', 'admin_notes', 'reviewed_at', 'created')
        read_only_fields = ('status', 'admin_notes', 'reviewed_at', 'created')


class AppealReviewSerializer(serializers.Serializer):
    decision = serializers.ChoiceField(
        choices=[
            (AccountAppeal.STATUS_APPROVED, 'Approved'),
            (AccountAppeal.STATUS_REJECTED, 'Rejected'),
        ]
    )
    admin_notes = serializers.CharField(required=False, allow_blank=True)
