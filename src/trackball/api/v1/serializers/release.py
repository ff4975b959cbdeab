from rest_framework import serializers

from releases.models import Release


class ReleaseSerializer(serializers.ModelSerializer):
    class Meta:
        model = Release
        fields = (
            'id',
            'title',
            'artist_name',
            'status',
            'payment_status',
            'takedown_requested',
            'archived',
            'rejection_reason',
            'notes',
            'artwork_url',
            'audio_file_url',
            'release_date',
            'created',
            'updated',
        )
        read_only_fields = (
            'status',
            'payment_status',
            'takedown_requested',
            'archived',
            'rejection_reason',
            'notes',
            'created',
            'updated',
        )


class AdminReleaseSerializer(ReleaseSerializer):
    user_id = serializers.IntegerField(read_only=True)
    user_email = serializers.EmailField(source='user.email', read_only=True)

    class Meta(ReleaseSerializer.Meta):
        fields = ReleaseSerializer.Meta.fields + ('user_id', 'user_email')


class ReleaseStatusUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Release.STATUS_CHOICES, required=False)
    payment_status = serializers.ChoiceField(
        choices=Release.PAYMENT_STATUS_CHOICES, required=False
    )
    rejection_reason = serializers.CharField(required=False, allow_blank=True)

    def validate(self, data):
        if 'status' not in data and 'payment_status' not in data:
            raise serializers.ValidationError(
                'Either status or payment_status is required.'
            )
        return data


class TakedownReviewSerializer(serializers.Serializer):
    approved = serializers.BooleanField()
    admin_notes = serializers.CharField(required=False, allow_blank=True)
