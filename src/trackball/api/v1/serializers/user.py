from rest_framework import serializers

from users.models import User


class UserSerializer(serializers.ModelSerializer):
    is_suspended = serializers.BooleanField(read_only=True)

    class Meta:
        model = User
        fields = (
            'id',
            'email',
            'first_name',
            'last_name',
            'artist_name',
            'account_type',
            'strike_count',
            'is_suspended',
            'is_banned',
            'is_locked',
            'locked_until',
        )
        read_only_fields = (
            'email',
            'strike_count',
            'is_suspended',
            'is_banned',
            'is_locked',
            'locked_until',
        )


class UserModerationSerializer(serializers.Serializer):
    ACTION_BAN = 'ban'
    ACTION_UNBAN = 'unban'
    ACTION_LOCK = 'lock'
    ACTION_UNLOCK = 'unlock'
    ACTION_RESET_STRIKES = 'reset_strikes'

    ACTION_CHOICES = (
        ACTION_BAN,
        ACTION_UNBAN,
        ACTION_LOCK,
        ACTION_UNLOCK,
        ACTION_RESET_STRIKES,
    )

    action = serializers.ChoiceField(choices=ACTION_CHOICES)
    days = serializers.IntegerField(min_value=1, required=False)


class UserEmailSerializer(serializers.Serializer):
    subject = serializers.CharField(max_length=255)
    message = serializers.CharField()
