import logging

from django.contrib.auth import authenticate
from django.db import transaction
from rest_framework import generics, permissions, status
from rest_framework.authtoken.models import Token
from rest_framework.response import Response
from rest_framework.views import APIView

from notifications.dispatcher import dispatch
from notifications.notices import RegistrationPendingNotice
from users.models import User
from .serializers import LoginSerializer, RegisterSerializer, UserSerializer

logger = logging.getLogger(__name__)


class RegisterView(generics.CreateAPIView):
    queryset = User.objects.all()
    serializer_class = RegisterSerializer
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        with transaction.atomic():
            user = serializer.save()
            logger.info('Registered %s %s', user.role, user.pk)

            # Owners sign in only once an admin has approved them.
            if user.role == User.Role.OWNER:
                dispatch(RegistrationPendingNotice(to=user.email, user_name=user.name))
                return Response({
                    "message": "Registration successful. Your account is pending admin approval. "
                               "You will receive an email once your account is approved.",
                }, status=status.HTTP_201_CREATED)

            token, created = Token.objects.get_or_create(user=user)

        return Response({
            "token": token.key,
            "user": UserSerializer(user).data,
        }, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = serializer.validated_data['email'].lower()
        password = serializer.validated_data['password']

        user = User.objects.filter(email=email).first()
        if user is None:
            return Response({"message": "Invalid credentials"}, status=status.HTTP_400_BAD_REQUEST)

        if user.role == User.Role.OWNER and user.status == User.Status.PENDING:
            return Response({"message": "Account awaiting admin approval"}, status=status.HTTP_403_FORBIDDEN)

        if authenticate(request, email=email, password=password) is None:
            return Response({"message": "Invalid credentials"}, status=status.HTTP_400_BAD_REQUEST)

        token, created = Token.objects.get_or_create(user=user)
        return Response({
            "token": token.key,
            "user": UserSerializer(user).data,
        })


class ProfileView(APIView):
    def get(self, request):
        serializer = UserSerializer(request.user)
        return Response(serializer.data)
