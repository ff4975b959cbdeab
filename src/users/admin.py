import binascii
import logging
import os

from django.contrib import admin, messages
from rest_framework.authtoken.models import Token, TokenProxy

from trackball.services import users as user_services
from trackball.services.appeals import review_appeal
from users.models import AccountAppeal, Fine, Notification, User

admin.site.unregister(TokenProxy)

logger = logging.getLogger(__name__)


def rotate_auth_token(token_qs):
    for item in token_qs:
        Token.objects.filter(pk=item.pk).update(
            key=binascii.hexlify(os.urandom(20)).decode()
        )


@admin.register(Token)
class TokenAdmin(admin.ModelAdmin):
    actions = ["action_rotate"]
    search_fields = ["=user__id"]
    raw_id_fields = ["user"]
    readonly_fields = ["key"]
    list_display = ["user", "key"]

    def action_rotate(self, request, qs):
        rotate_auth_token(qs)

    action_rotate.short_description = "Rotate auth key"


class FineInline(admin.TabularInline):
    model = Fine
    fk_name = 'user'
    extra = 0
    fields = ('amount', 'fine_type', 'reason', 'strike_number', 'status', 'is_mock')
    readonly_fields = fields
    can_delete = False
    show_change_link = True


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    actions = [
        "ban_users",
        "unban_users",
        "lock_users",
        "unlock_users",
        "reset_strikes",
    ]
    list_display = (
        'id',
        'name',
        'email',
        'artist_name',
        'account_type',
        'strike_count',
        'is_suspended',
        'is_banned',
        'is_locked',
        'locked_until',
    )
    list_display_links = ('id', 'name', 'email')
    list_filter = ('account_type', 'is_banned', 'is_locked', 'is_staff')
    ordering = ('is_staff', '-id')
    search_fields = ('=id', 'first_name', 'last_name', 'artist_name', '=email')
    readonly_fields = ('password', 'last_login', 'created', 'updated', 'is_suspended')
    inlines = [FineInline]

    def is_suspended(self, obj):
        return obj.is_suspended

    is_suspended.boolean = True

    def ban_users(self, request, queryset):
        for user in queryset:
            user_services.ban_user(user)
        self.message_user(request, f"Banned {queryset.count()} users", messages.SUCCESS)

    ban_users.short_description = "Ban selected users"

    def unban_users(self, request, queryset):
        for user in queryset:
            user_services.unban_user(user)
        self.message_user(
            request, f"Unbanned {queryset.count()} users", messages.SUCCESS
        )

    unban_users.short_description = "Unban selected users"

    def lock_users(self, request, queryset):
        for user in queryset:
            user.lock()
        self.message_user(
            request, f"Locked {queryset.count()} users for a week", messages.SUCCESS
        )

    lock_users.short_description = "Lock selected users for a week"

    def unlock_users(self, request, queryset):
        for user in queryset:
            user.unlock()
        self.message_user(
            request, f"Unlocked {queryset.count()} users", messages.SUCCESS
        )

    unlock_users.short_description = "Unlock selected users"

    def reset_strikes(self, request, queryset):
        for user in queryset:
            user_services.reset_strikes(user)
        self.message_user(
            request, f"Reset strikes of {queryset.count()} users", messages.SUCCESS
        )

    reset_strikes.short_description = "Reset strikes"


@admin.register(Fine)
class FineAdmin(admin.ModelAdmin):
    list_display = (
        'id',
        'user',
        'amount',
        'fine_type',
        'strike_number',
        'status',
        'is_mock',
        'created',
    )
    list_filter = ('status', 'fine_type', 'is_mock')
    raw_id_fields = ('user', 'issued_by')
    search_fields = ('=user__id', '=user__email')
    readonly_fields = ('strike_number', 'paid_at', 'cancelled_at', 'created')

    def has_add_permission(self, request):
        # Fines count strikes, issue them through the API
        return False


@admin.register(AccountAppeal)
class AccountAppealAdmin(admin.ModelAdmin):
    actions = ["approve_appeals", "reject_appeals"]
    list_display = ('id', 'user', 'status', 'reviewed_by', 'reviewed_at', 'created')
    list_filter = ('status',)
    raw_id_fields = ('user', 'reviewed_by')
    readonly_fields = ('reviewed_by', 'reviewed_at', 'created')
    search_fields = ('=user__id', '=user__email')

    def _review(self, request, queryset, decision):
        reviewed = 0
        for appeal in queryset:
            appeal_response = review_appeal(appeal, decision, request.user)
            if appeal_response.success:
                reviewed += 1
            else:
                self.message_user(
                    request,
                    f"Appeal {appeal.pk}: {appeal_response.failure_reason}",
                    messages.WARNING,
                )
        self.message_user(request, f"{decision.title()} {reviewed} appeals")

    def approve_appeals(self, request, queryset):
        self._review(request, queryset, AccountAppeal.STATUS_APPROVED)

    approve_appeals.short_description = "Approve selected appeals"

    def reject_appeals(self, request, queryset):
        self._review(request, queryset, AccountAppeal.STATUS_REJECTED)

    reject_appeals.short_description = "Reject selected appeals"


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'title', 'type', 'is_read', 'created')
    list_filter = ('type', 'is_read')
    raw_id_fields = ('user',)
