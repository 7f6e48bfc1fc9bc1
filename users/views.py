from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from api.permissions import IsAdmin

from . import services
from .serializers import AdminUserSerializer


class AdminUserListAPIView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        users = services.list_users(request.user)
        serializer = AdminUserSerializer(users, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)


class OwnerApprovalAPIView(APIView):
    permission_classes = [IsAdmin]

    def put(self, request, user_id):
        user = services.approve_owner(request.user, user_id)
        return Response({
            'message': 'Owner approved',
            'user': AdminUserSerializer(user).data,
        }, status=status.HTTP_200_OK)


class DeclineUserAPIView(APIView):
    permission_classes = [IsAdmin]

    def delete(self, request, user_id):
        services.decline_user(request.user, user_id)
        return Response({'message': 'User declined and deleted'}, status=status.HTTP_200_OK)
