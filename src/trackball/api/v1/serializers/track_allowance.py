from rest_framework import serializers


class TrackAllowanceUsageSerializer(serializers.Serializer):
    month_year = serializers.CharField()
    tracks_allowed = serializers.IntegerField()
    track_count = serializers.IntegerField()
    tracks_remaining = serializers.IntegerField()


class ConsumeTrackAllowanceSerializer(serializers.Serializer):
    track_count = serializers.IntegerField(min_value=1)


class GrantTrackAllowanceSerializer(serializers.Serializer):
    tracks_per_month = serializers.IntegerField(min_value=1)


class CheckoutSerializer(serializers.Serializer):
    tracks_per_month = serializers.IntegerField(min_value=1)
    success_url = serializers.URLField()
    cancel_url = serializers.URLField()


class CustomerPortalSerializer(serializers.Serializer):
    return_url = serializers.URLField()
