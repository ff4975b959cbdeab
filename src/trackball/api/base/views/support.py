from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.generics import ListAPIView, ListCreateAPIView, RetrieveAPIView
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from trackball import mixins as logmixins
from trackball.api.helpers import failure_response
from trackball.api.v1.serializers.support import (
    SupportTicketSerializer,
    TicketMessageSerializer,
    TicketReplySerializer,
)
from trackball.models import SupportTicket
from trackball.permissions import NotUnderMaintenance
from trackball.services.support import (
    TicketReplyResponse,
    add_user_message,
    create_ticket,
    reply_to_ticket,
)

ERROR_RESPONSE_MAPPING = {
    TicketReplyResponse.FAILED_REASON_INVALID_STATUS: {
        "display_code": "ticket_error_invalid_status",
        "error_message": "Unknown ticket status.",
    },
}


class SupportTicketListView(logmixins.LogMixin, ListCreateAPIView):
    permission_classes = [IsAuthenticated, NotUnderMaintenance]
    serializer_class = SupportTicketSerializer

    def get_queryset(self):
        return SupportTicket.objects.filter(user=self.request.user).prefetch_related(
            'messages'
        )

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        ticket = create_ticket(request.user, **serializer.validated_data)

        return Response(
            SupportTicketSerializer(ticket).data, status=status.HTTP_201_CREATED
        )


class SupportTicketDetailView(logmixins.LogMixin, RetrieveAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = SupportTicketSerializer

    def get_queryset(self):
        return SupportTicket.objects.filter(user=self.request.user)


class TicketMessageView(logmixins.LogMixin, APIView):
    permission_classes = [IsAuthenticated, NotUnderMaintenance]
    allowed_methods = ["POST"]

    def post(self, request, *args, **kwargs):
        try:
            ticket = SupportTicket.objects.get(
                pk=kwargs['ticket_id'], user=request.user
            )
        except SupportTicket.DoesNotExist:
            raise NotFound()

        serializer = TicketMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        ticket_message = add_user_message(
            ticket, request.user, serializer.validated_data['message']
        )
        return Response(
            TicketMessageSerializer(ticket_message).data,
            status=status.HTTP_201_CREATED,
        )


class AdminSupportTicketListView(logmixins.LogMixin, ListAPIView):
    permission_classes = [IsAdminUser]
    serializer_class = SupportTicketSerializer
    filterset_fields = ['status', 'priority']

    def get_queryset(self):
        return SupportTicket.objects.prefetch_related('messages')


class TicketReplyView(logmixins.LogMixin, APIView):
    permission_classes = [IsAdminUser]
    allowed_methods = ["POST"]

    def post(self, request, *args, **kwargs):
        try:
            ticket = SupportTicket.objects.get(pk=kwargs['ticket_id'])
        except SupportTicket.DoesNotExist:
            raise NotFound()

        serializer = TicketReplySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        reply_response = reply_to_ticket(
            ticket,
            request.user,
            serializer.validated_data['message'],
            new_status=serializer.validated_data.get('status'),
            escalation_email=serializer.validated_data.get('escalation_email'),
        )

        if reply_response.success:
            return Response(
                TicketMessageSerializer(reply_response.ticket_message).data,
                status=status.HTTP_201_CREATED,
            )

        return failure_response(reply_response, ERROR_RESPONSE_MAPPING)
