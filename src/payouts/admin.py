import logging

from django.contrib import admin, messages

from payouts.models import PayoutRequest
from trackball.services.payouts import approve_payout, pay_payout, reject_payout
from trackball.vendor.stripe.exceptions import StripeError

logger = logging.getLogger(__name__)


@admin.register(PayoutRequest)
class PayoutRequestAdmin(admin.ModelAdmin):
    actions = ['approve_requests', 'reject_requests', 'pay_requests']
    list_display = ('id', 'user', 'amount', 'status', 'stripe_payout_id', 'created')
    list_filter = ('status',)
    raw_id_fields = ('user',)
    readonly_fields = ('status', 'stripe_payout_id', 'created', 'updated')
    search_fields = ('=user__id', '=user__email', 'stripe_payout_id')

    def _apply(self, request, queryset, func):
        done = 0
        for payout_request in queryset:
            payout_response = func(payout_request)
            if payout_response.success:
                done += 1
            else:
                self.message_user(
                    request,
                    f"Payout request {payout_request.pk}: "
                    f"{payout_response.failure_reason}",
                    messages.WARNING,
                )
        return done

    def approve_requests(self, request, queryset):
        done = self._apply(request, queryset, approve_payout)
        self.message_user(request, f"Approved {done} payout requests")

    approve_requests.short_description = 'Approve payout requests'

    def reject_requests(self, request, queryset):
        done = self._apply(request, queryset, reject_payout)
        self.message_user(request, f"Rejected {done} payout requests")

    reject_requests.short_description = 'Reject payout requests'

    def pay_requests(self, request, queryset):
        try:
            done = self._apply(request, queryset, pay_payout)
        except StripeError as e:
            logger.warning('Stripe payout failed: %s', e.message)
            self.message_user(request, f"Stripe: {e.message}", messages.ERROR)
            return
        self.message_user(request, f"Paid {done} payout requests", messages.SUCCESS)

    pay_requests.short_description = 'Pay out through Stripe'
