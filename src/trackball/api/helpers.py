import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from trackball.api.base.views.exceptions import (
    PaymentDeclinedError,
    PaymentProviderError,
)
from trackball.vendor.stripe.exceptions import StripeCardError

logger = logging.getLogger(__name__)


def failure_response(
    service_response, error_mapping, http_status=status.HTTP_405_METHOD_NOT_ALLOWED
):
    """Turns a failed service response into the `display_code` error payload."""
    if service_response.failure_reason in error_mapping:
        return Response(
            status=http_status, data=error_mapping[service_response.failure_reason]
        )

    logger.error('Unmapped failure reason %s', service_response.failure_reason)
    return Response(status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def stripe_api_exception(error):
    if isinstance(error, StripeCardError):
        return PaymentDeclinedError(detail=error.message)
    return PaymentProviderError(detail=error.message)


def service_validation_error(error):
    return ValidationError({'non_field_errors': [str(error)]})
