import logging

from django.contrib import admin, messages

from releases.models import Release, ReleaseStatusChange
from trackball.services.release_status import update_release_status
from trackball.services.takedown import process_takedown

logger = logging.getLogger(__name__)


class ReleaseStatusChangeInline(admin.TabularInline):
    model = ReleaseStatusChange
    extra = 0
    fields = ('old_status', 'new_status', 'created')
    readonly_fields = fields
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


class TakedownRequestedFilter(admin.SimpleListFilter):
    title = 'Takedown requested'
    parameter_name = 'takedown'

    def lookups(self, request, model_admin):
        return (('yes', 'Yes'), ('no', 'No'))

    def queryset(self, request, queryset):
        if self.value() == 'yes':
            return queryset.filter(takedown_requested=True)
        if self.value() == 'no':
            return queryset.filter(takedown_requested=False)
        return queryset


@admin.register(Release)
class AdminRelease(admin.ModelAdmin):
    list_filter = ('status', 'payment_status', 'archived', TakedownRequestedFilter)
    list_display = (
        'id',
        'title',
        'artist_name',
        'user',
        'status',
        'payment_status',
        'takedown_requested',
        'archived',
        'release_date',
        'updated',
    )
    raw_id_fields = ('user',)
    readonly_fields = ('status', 'takedown_requested', 'created', 'updated')
    search_fields = ('title', 'artist_name', '=user__id', '=user__email')
    inlines = (ReleaseStatusChangeInline,)
    actions = [
        'set_status_processing',
        'set_status_approved',
        'set_status_delivering',
        'set_status_delivered',
        'set_status_rejected',
        'set_status_on_hold',
        'approve_takedowns',
        'deny_takedowns',
    ]

    def _set_status(self, request, queryset, new_status):
        updated = 0
        for release in queryset:
            status_response = update_release_status(release.pk, new_status)
            if status_response.success:
                updated += 1
            else:
                self.message_user(
                    request,
                    f"Release {release.pk}: {status_response.failure_reason}",
                    messages.WARNING,
                )
        self.message_user(request, f"Moved {updated} releases to {new_status}")

    def set_status_processing(self, request, queryset):
        self._set_status(request, queryset, Release.STATUS_PROCESSING)

    set_status_processing.short_description = 'Set status: processing'

    def set_status_approved(self, request, queryset):
        self._set_status(request, queryset, Release.STATUS_APPROVED)

    set_status_approved.short_description = 'Set status: approved'

    def set_status_delivering(self, request, queryset):
        self._set_status(request, queryset, Release.STATUS_DELIVERING)

    set_status_delivering.short_description = 'Set status: delivering'

    def set_status_delivered(self, request, queryset):
        self._set_status(request, queryset, Release.STATUS_DELIVERED)

    set_status_delivered.short_description = 'Set status: delivered'

    def set_status_rejected(self, request, queryset):
        self._set_status(request, queryset, Release.STATUS_REJECTED)

    set_status_rejected.short_description = 'Set status: rejected'

    def set_status_on_hold(self, request, queryset):
        self._set_status(request, queryset, Release.STATUS_ON_HOLD)

    set_status_on_hold.short_description = 'Set status: on hold'

    def _process_takedowns(self, request, queryset, approved):
        processed = 0
        for release in queryset:
            takedown_response = process_takedown(release, approved)
            if takedown_response.success:
                processed += 1
            else:
                self.message_user(
                    request,
                    f"Release {release.pk}: {takedown_response.failure_reason}",
                    messages.WARNING,
                )
        self.message_user(request, f"Processed {processed} takedown requests")

    def approve_takedowns(self, request, queryset):
        self._process_takedowns(request, queryset, True)

    approve_takedowns.short_description = 'Approve takedown requests'

    def deny_takedowns(self, request, queryset):
        self._process_takedowns(request, queryset, False)

    deny_takedowns.short_description = 'Deny takedown requests'
