from django.urls import path
from rest_framework import routers

from trackball.api.base.views import (
    appeals,
    fines,
    notifications,
    payouts,
    platform,
    release,
    support,
    takedown,
    track_allowance,
    users,
)

router = routers.DefaultRouter()
router.register(r'releases', release.ReleaseViewSet, basename='release')
router.register(
    r'admin/releases', release.AdminReleaseViewSet, basename='admin-release'
)

urlpatterns = [
    path(
        'platform/status/',
        platform.PlatformStatusView.as_view(),
        name='platform-status',
    ),
    path('users/me/', users.CurrentUserView.as_view(), name='user-me'),
    path(
        'releases/<int:release_id>/takedown/',
        takedown.TakedownView.as_view(),
        name='release-takedown',
    ),
    path(
        'notifications/',
        notifications.NotificationListView.as_view(),
        name='notifications',
    ),
    path(
        'notifications/read/',
        notifications.NotificationReadView.as_view(),
        name='notifications-read-all',
    ),
    path(
        'notifications/<int:notification_id>/read/',
        notifications.NotificationReadView.as_view(),
        name='notification-read',
    ),
    path('fines/', fines.FineListView.as_view(), name='fines'),
    path('fines/pay/', fines.PayFinesView.as_view(), name='fines-pay'),
    path('fines/cancel/', fines.CancelFinesView.as_view(), name='fines-cancel'),
    path('appeals/', appeals.AppealView.as_view(), name='appeals'),
    path('payouts/', payouts.PayoutRequestView.as_view(), name='payouts'),
    path(
        'support/tickets/',
        support.SupportTicketListView.as_view(),
        name='support-tickets',
    ),
    path(
        'support/tickets/<int:pk>/',
        support.SupportTicketDetailView.as_view(),
        name='support-ticket',
    ),
    path(
        'support/tickets/<int:ticket_id>/messages/',
        support.TicketMessageView.as_view(),
        name='support-ticket-messages',
    ),
    path(
        'track-allowance/',
        track_allowance.TrackAllowanceView.as_view(),
        name='track-allowance',
    ),
    path(
        'track-allowance/consume/',
        track_allowance.ConsumeTrackAllowanceView.as_view(),
        name='track-allowance-consume',
    ),
    path(
        'track-allowance/checkout/',
        track_allowance.CheckoutView.as_view(),
        name='track-allowance-checkout',
    ),
    path(
        'billing/portal/',
        track_allowance.CustomerPortalView.as_view(),
        name='billing-portal',
    ),
    # Admin
    path(
        'admin/releases/<int:release_id>/status/',
        release.ReleaseStatusView.as_view(),
        name='admin-release-status',
    ),
    path(
        'admin/releases/<int:release_id>/takedown/',
        takedown.TakedownReviewView.as_view(),
        name='admin-release-takedown',
    ),
    path(
        'admin/takedowns/',
        takedown.TakedownRequestListView.as_view(),
        name='admin-takedowns',
    ),
    path('admin/fines/', fines.IssueFineView.as_view(), name='admin-fines'),
    path(
        'admin/appeals/<int:appeal_id>/review/',
        appeals.AppealReviewView.as_view(),
        name='admin-appeal-review',
    ),
    path(
        'admin/payouts/',
        payouts.AdminPayoutRequestListView.as_view(),
        name='admin-payouts',
    ),
    path(
        'admin/payouts/<int:payout_request_id>/<str:action>/',
        payouts.AdminPayoutActionView.as_view(),
        name='admin-payout-action',
    ),
    path(
        'admin/stripe/balance/',
        payouts.StripeBalanceView.as_view(),
        name='admin-stripe-balance',
    ),
    path(
        'admin/support/tickets/',
        support.AdminSupportTicketListView.as_view(),
        name='admin-support-tickets',
    ),
    path(
        'admin/support/tickets/<int:ticket_id>/reply/',
        support.TicketReplyView.as_view(),
        name='admin-support-ticket-reply',
    ),
    path(
        'admin/users/<int:user_id>/moderation/',
        users.UserModerationView.as_view(),
        name='admin-user-moderation',
    ),
    path(
        'admin/users/<int:user_id>/email/',
        users.UserEmailView.as_view(),
        name='admin-user-email',
    ),
    path(
        'admin/users/<int:user_id>/track-allowance/',
        track_allowance.GrantTrackAllowanceView.as_view(),
        name='admin-user-track-allowance',
    ),
] + router.urls
