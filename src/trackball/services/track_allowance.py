import logging

from django.conf import settings
from django.db import transaction
from django.db.models import F

from subscriptions.models import TrackAllowanceUsage
from trackball import tasks
from trackball.services.exceptions import (
    InsufficientTrackAllowanceError,
    InvalidTrackAllowanceError,
    NoStripeCustomerError,
)
from trackball.services.notifications import enqueue
from trackball.utils import current_month_year, to_cents
from trackball.vendor.stripe.client import TRACK_ALLOWANCE_TYPE, StripeClient
from trackball.vendor.stripe.exceptions import StripeError

logger = logging.getLogger(__name__)


def price_per_track(tracks_per_month):
    if tracks_per_month > settings.TRACK_ALLOWANCE_BULK_THRESHOLD:
        return settings.TRACK_ALLOWANCE_PRICE_BULK
    return settings.TRACK_ALLOWANCE_PRICE_STANDARD


def monthly_amount(tracks_per_month):
    return price_per_track(tracks_per_month) * tracks_per_month


def _clean_track_count(value, name):
    try:
        value = int(value)
    except (TypeError, ValueError):
        raise InvalidTrackAllowanceError('%s must be a whole number' % name)
    if value < 1:
        raise InvalidTrackAllowanceError('%s must be at least 1' % name)
    return value


def _customer_id(client, user):
    customer = client.find_or_create_customer(
        user.email, name=user.name or None, metadata={'user_id': user.pk}
    )
    if user.stripe_customer_id != customer['id']:
        user.stripe_customer_id = customer['id']
        user.save(update_fields=['stripe_customer_id', 'updated'])
    return customer['id']


def _cancel_track_allowance_subscriptions(client, customer_id):
    cancelled = []
    for subscription in client.list_subscriptions(customer_id):
        metadata = subscription.get('metadata') or {}
        if metadata.get('type') == TRACK_ALLOWANCE_TYPE:
            client.cancel_subscription(subscription['id'])
            cancelled.append(subscription['id'])
    return cancelled


def _track_allowance_subscription(client, customer_id):
    for subscription in client.list_subscriptions(customer_id):
        metadata = subscription.get('metadata') or {}
        if metadata.get('type') == TRACK_ALLOWANCE_TYPE:
            return subscription
    return None


def check_track_allowance(user):
    """
    Brings the usage row of the current month in line with the user's active
    track allowance subscription on Stripe, creating it on the first check
    of a month. Tracks already used this month are kept.

    Users without a Stripe customer have nothing to sync. A Stripe failure is
    logged and the stored row is used as is.
    """
    if not user.stripe_customer_id:
        return TrackAllowanceUsage.objects.current(user)

    try:
        subscription = _track_allowance_subscription(
            StripeClient(), user.stripe_customer_id
        )
    except StripeError as e:
        logger.warning(
            'Track allowance of user %s not synced with Stripe: %s', user.pk, e.message
        )
        return TrackAllowanceUsage.objects.current(user)

    if subscription is None:
        return TrackAllowanceUsage.objects.current(user)

    metadata = subscription.get('metadata') or {}
    try:
        tracks_allowed = int(
            metadata.get('tracks_allowed') or metadata.get('tracks_per_month') or 0
        )
    except (TypeError, ValueError):
        logger.warning(
            'Subscription %s has an unreadable track allowance %s',
            subscription['id'],
            metadata,
        )
        tracks_allowed = 0

    usage, created = TrackAllowanceUsage.objects.get_or_create(
        user=user,
        month_year=current_month_year(),
        defaults={
            'subscription_id': subscription['id'],
            'tracks_allowed': tracks_allowed,
        },
    )
    if not created and (
        usage.subscription_id != subscription['id']
        or usage.tracks_allowed != tracks_allowed
    ):
        usage.subscription_id = subscription['id']
        usage.tracks_allowed = tracks_allowed
        usage.save(update_fields=['subscription_id', 'tracks_allowed', 'updated'])

    if created:
        logger.info(
            'Started %s usage of user %s with %s tracks from subscription %s',
            usage.month_year,
            user.pk,
            tracks_allowed,
            subscription['id'],
        )
    return usage


def get_usage(user):
    usage = check_track_allowance(user)
    tracks_allowed = usage.tracks_allowed if usage else 0
    track_count = usage.track_count if usage else 0
    return {
        'month_year': current_month_year(),
        'tracks_allowed': tracks_allowed,
        'track_count': track_count,
        'tracks_remaining': max(tracks_allowed - track_count, 0),
        'subscription_id': usage.subscription_id if usage else None,
    }


def grant_track_allowance(user, tracks_per_month, granted_by=None):
    """
    Gives the user a free monthly track allowance backed by a $0 Stripe
    subscription. An earlier track allowance subscription is cancelled first,
    the usage of the current month restarts from zero.
    """
    tracks_per_month = _clean_track_count(tracks_per_month, 'tracks_per_month')
    client = StripeClient()

    customer_id = _customer_id(client, user)
    for subscription_id in _cancel_track_allowance_subscriptions(client, customer_id):
        logger.info(
            'Cancelled track allowance subscription %s of user %s',
            subscription_id,
            user.pk,
        )

    metadata = {
        'type': TRACK_ALLOWANCE_TYPE,
        'tracks_allowed': tracks_per_month,
        'admin_granted': True,
    }
    price = client.create_price(
        0,
        'Track Allowance - %s tracks/month (Admin Granted)' % tracks_per_month,
        metadata=metadata,
    )
    subscription = client.create_subscription(
        customer_id,
        price['id'],
        metadata=dict(metadata, granted_by=granted_by.pk if granted_by else ''),
    )

    usage, _ = TrackAllowanceUsage.objects.update_or_create(
        user=user,
        month_year=current_month_year(),
        defaults={
            'subscription_id': subscription['id'],
            'tracks_allowed': tracks_per_month,
            'track_count': 0,
        },
    )
    logger.info(
        'Granted %s tracks/month to user %s with subscription %s',
        tracks_per_month,
        user.pk,
        subscription['id'],
    )

    enqueue(tasks.send_track_allowance_email, user.pk, tracks_per_month)
    return usage


def revoke_track_allowance(user, subscription_id=None):
    client = StripeClient()

    if subscription_id:
        client.cancel_subscription(subscription_id)
    else:
        customer = client.find_customer(user.email)
        if customer is not None:
            _cancel_track_allowance_subscriptions(client, customer['id'])

    deleted, _ = TrackAllowanceUsage.objects.filter(
        user=user, month_year=current_month_year()
    ).delete()
    logger.info('Revoked track allowance of user %s', user.pk)
    return deleted


def consume_track_allowance(user, track_count):
    track_count = _clean_track_count(track_count, 'track_count')

    check_track_allowance(user)

    with transaction.atomic():
        usage = (
            TrackAllowanceUsage.objects.select_for_update()
            .filter(user=user, month_year=current_month_year())
            .first()
        )
        remaining = usage.remaining if usage else 0
        if remaining < track_count:
            raise InsufficientTrackAllowanceError(remaining, track_count)

        TrackAllowanceUsage.objects.filter(pk=usage.pk).update(
            track_count=F('track_count') + track_count
        )
        usage.refresh_from_db()

    logger.info(
        'User %s consumed %s tracks, %s remaining',
        user.pk,
        track_count,
        usage.remaining,
    )
    return usage


def create_checkout(user, tracks_per_month, success_url, cancel_url):
    tracks_per_month = _clean_track_count(tracks_per_month, 'tracks_per_month')
    client = StripeClient()
    customer_id = _customer_id(client, user)

    metadata = {
        'type': TRACK_ALLOWANCE_TYPE,
        'tracks_allowed': tracks_per_month,
        'user_id': user.pk,
    }
    session = client.create_checkout_session(
        customer_id,
        line_items=[
            {
                'price_data': {
                    'currency': settings.STRIPE_CURRENCY,
                    'unit_amount': to_cents(price_per_track(tracks_per_month)),
                    'recurring': {'interval': 'month'},
                    'product_data': {
                        'name': 'Track Allowance - %s tracks/month' % tracks_per_month
                    },
                },
                'quantity': tracks_per_month,
            }
        ],
        success_url=success_url,
        cancel_url=cancel_url,
        mode='subscription',
        metadata=metadata,
    )
    return session['url']


def create_customer_portal(user, return_url):
    client = StripeClient()
    customer = client.find_customer(user.email)
    if customer is None:
        raise NoStripeCustomerError('No Stripe customer found for this account')
    return client.create_portal_session(customer['id'], return_url)['url']
