from rest_framework.generics import get_object_or_404
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from trackball import mixins as logmixins
from trackball.api.base.views.exceptions import (
    InsufficientTrackAllowance,
    NoStripeCustomer,
)
from trackball.api.helpers import stripe_api_exception
from trackball.api.v1.serializers.track_allowance import (
    CheckoutSerializer,
    ConsumeTrackAllowanceSerializer,
    CustomerPortalSerializer,
    GrantTrackAllowanceSerializer,
    TrackAllowanceUsageSerializer,
)
from trackball.permissions import IsNotRestricted, NotUnderMaintenance
from trackball.services import track_allowance
from trackball.services.exceptions import (
    InsufficientTrackAllowanceError,
    NoStripeCustomerError,
)
from trackball.vendor.stripe.exceptions import StripeError
from users.models import User


class TrackAllowanceView(logmixins.LogMixin, APIView):
    permission_classes = [IsAuthenticated]
    allowed_methods = ["GET"]

    def get(self, request, *args, **kwargs):
        usage = track_allowance.get_usage(request.user)
        return Response(TrackAllowanceUsageSerializer(usage).data)


class ConsumeTrackAllowanceView(logmixins.LogMixin, APIView):
    permission_classes = [IsAuthenticated, NotUnderMaintenance, IsNotRestricted]
    allowed_methods = ["POST"]

    def post(self, request, *args, **kwargs):
        serializer = ConsumeTrackAllowanceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            track_allowance.consume_track_allowance(
                request.user, serializer.validated_data['track_count']
            )
        except InsufficientTrackAllowanceError as e:
            raise InsufficientTrackAllowance(detail=str(e))

        usage = track_allowance.get_usage(request.user)
        return Response(TrackAllowanceUsageSerializer(usage).data)


class CheckoutView(logmixins.LogMixin, APIView):
    permission_classes = [IsAuthenticated, NotUnderMaintenance, IsNotRestricted]
    allowed_methods = ["POST"]

    def post(self, request, *args, **kwargs):
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            url = track_allowance.create_checkout(
                request.user, **serializer.validated_data
            )
        except StripeError as e:
            raise stripe_api_exception(e)

        return Response({'url': url})


class CustomerPortalView(logmixins.LogMixin, APIView):
    permission_classes = [IsAuthenticated, NotUnderMaintenance]
    allowed_methods = ["POST"]

    def post(self, request, *args, **kwargs):
        serializer = CustomerPortalSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            url = track_allowance.create_customer_portal(
                request.user, serializer.validated_data['return_url']
            )
        except NoStripeCustomerError:
            raise NoStripeCustomer()
        except StripeError as e:
            raise stripe_api_exception(e)

        return Response({'url': url})


class GrantTrackAllowanceView(logmixins.LogMixin, APIView):
    permission_classes = [IsAdminUser]
    allowed_methods = ["POST", "DELETE"]

    def post(self, request, *args, **kwargs):
        user = get_object_or_404(User, pk=kwargs['user_id'])

        serializer = GrantTrackAllowanceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            track_allowance.grant_track_allowance(
                user, serializer.validated_data['tracks_per_month'], request.user
            )
        except StripeError as e:
            raise stripe_api_exception(e)

        return Response(
            TrackAllowanceUsageSerializer(track_allowance.get_usage(user)).data
        )

    def delete(self, request, *args, **kwargs):
        user = get_object_or_404(User, pk=kwargs['user_id'])

        try:
            track_allowance.revoke_track_allowance(
                user, request.data.get('subscription_id')
            )
        except StripeError as e:
            raise stripe_api_exception(e)

        return Response(
            TrackAllowanceUsageSerializer(track_allowance.get_usage(user)).data
        )
