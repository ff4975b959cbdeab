from django.contrib import admin

from subscriptions.models import TrackAllowanceUsage


@admin.register(TrackAllowanceUsage)
class TrackAllowanceUsageAdmin(admin.ModelAdmin):
    list_display = (
        'id',
        'user',
        'month_year',
        'tracks_allowed',
        'track_count',
        'subscription_id',
        'updated',
    )
    list_filter = ('month_year',)
    raw_id_fields = ('user',)
    search_fields = ('=user__id', '=user__email', 'subscription_id')
