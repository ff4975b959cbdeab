from django.utils.translation import gettext_lazy as _
from rest_framework import status
from rest_framework.exceptions import APIException


class PaymentProviderError(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = _('The payment provider could not process the request.')
    default_code = 'payment_provider_error'


class PaymentDeclinedError(APIException):
    status_code = status.HTTP_402_PAYMENT_REQUIRED
    default_detail = _('The payment was declined.')
    default_code = 'payment_declined'


class InsufficientTrackAllowance(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = _('Insufficient track allowance.')
    default_code = 'insufficient_track_allowance'


class NoStripeCustomer(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = _('No billing account exists for this user.')
    default_code = 'no_stripe_customer'


class ReleaseDoesNotExist(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = _('Release ID does not exist')
    default_code = 'missing_release_error'
