from django.contrib import admin

from trackball.models import (
    Announcement,
    AnnouncementBar,
    MaintenanceSettings,
    SupportTicket,
    TicketMessage,
)


class TicketMessageInline(admin.TabularInline):
    model = TicketMessage
    extra = 0
    fields = ('user', 'message', 'is_admin_reply', 'created')
    readonly_fields = fields
    can_delete = False

    def has_add_permission(self, request, obj=None):
        # Replies go through the API so the user gets an e-mail
        return False


@admin.register(SupportTicket)
class SupportTicketAdmin(admin.ModelAdmin):
    list_display = ('id', 'subject', 'user', 'priority', 'status', 'updated')
    list_filter = ('status', 'priority', 'category')
    raw_id_fields = ('user',)
    search_fields = ('subject', '=user__id', '=user__email')
    inlines = (TicketMessageInline,)


@admin.register(Announcement)
class AnnouncementAdmin(admin.ModelAdmin):
    list_display = ('id', 'title', 'is_active', 'created')
    list_filter = ('is_active',)
    raw_id_fields = ('created_by',)


@admin.register(AnnouncementBar)
class AnnouncementBarAdmin(admin.ModelAdmin):
    list_display = ('id', 'message', 'is_active', 'start_date', 'end_date')
    list_filter = ('is_active',)
    raw_id_fields = ('created_by',)


@admin.register(MaintenanceSettings)
class MaintenanceSettingsAdmin(admin.ModelAdmin):
    list_display = ('id', 'maintenance_type', 'is_active', 'start_time', 'end_time')
    list_filter = ('is_active', 'maintenance_type')
    raw_id_fields = ('updated_by',)
