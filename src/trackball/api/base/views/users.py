from rest_framework import status
from rest_framework.generics import RetrieveUpdateAPIView, get_object_or_404
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from trackball import mixins as logmixins
from trackball.api.v1.serializers.user import (
    UserEmailSerializer,
    UserModerationSerializer,
    UserSerializer,
)
from trackball.permissions import IsNotRestricted, NotUnderMaintenance
from trackball.services import users as user_services
from users.models import User


class CurrentUserView(logmixins.LogMixin, RetrieveUpdateAPIView):
    permission_classes = [IsAuthenticated, NotUnderMaintenance, IsNotRestricted]
    serializer_class = UserSerializer
    http_method_names = ['get', 'patch']

    def get_object(self):
        return self.request.user


class UserModerationView(logmixins.LogMixin, APIView):
    permission_classes = [IsAdminUser]
    allowed_methods = ["POST"]

    def post(self, request, *args, **kwargs):
        user = get_object_or_404(User, pk=kwargs['user_id'])

        serializer = UserModerationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        action = serializer.validated_data['action']

        if action == UserModerationSerializer.ACTION_BAN:
            user_services.ban_user(user)
        elif action == UserModerationSerializer.ACTION_UNBAN:
            user_services.unban_user(user)
        elif action == UserModerationSerializer.ACTION_LOCK:
            user.lock(serializer.validated_data.get('days'))
        elif action == UserModerationSerializer.ACTION_UNLOCK:
            user.unlock()
        elif action == UserModerationSerializer.ACTION_RESET_STRIKES:
            user_services.reset_strikes(user)

        return Response(UserSerializer(user).data)


class UserEmailView(logmixins.LogMixin, APIView):
    permission_classes = [IsAdminUser]
    allowed_methods = ["POST"]

    def post(self, request, *args, **kwargs):
        user = get_object_or_404(User, pk=kwargs['user_id'])

        serializer = UserEmailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user_services.send_email_to_user(
            user,
            serializer.validated_data['subject'],
            serializer.validated_data['message'],
        )
        return Response(status=status.HTTP_202_ACCEPTED)
