from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from api.exceptions import ValidationError
from api.permissions import IsAdmin, IsCustomer, IsOwner

from . import services
from .serializers import BookingRejectionSerializer, BookingSerializer


class BookingListCreateAPIView(APIView):
    """Customers book cars here; GET lists the caller's bookings (all of them for admins)."""

    def get_permissions(self):
        if self.request.method == 'POST':
            return [IsCustomer()]
        return [IsAuthenticated()]

    def get(self, request):
        bookings = services.list_bookings(request.user)
        return Response(BookingSerializer(bookings, many=True).data)

    def post(self, request):
        booking = services.create_booking(request.user, request.data)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class AdminBookingListAPIView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        bookings = services.list_all_bookings(request.user)
        return Response(BookingSerializer(bookings, many=True).data)


class OwnerPendingBookingsAPIView(APIView):
    permission_classes = [IsOwner]

    def get(self, request):
        bookings = services.list_pending_owner_bookings(request.user)
        return Response(BookingSerializer(bookings, many=True).data)


class BookingApproveAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def put(self, request, booking_id):
        booking = services.approve_booking(request.user, booking_id)
        return Response({'booking': BookingSerializer(booking).data}, status=status.HTTP_200_OK)


class BookingRejectAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def put(self, request, booking_id):
        serializer = BookingRejectionSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationError(serializer.errors)
        booking = services.reject_booking(
            request.user, booking_id, reason=serializer.validated_data.get('rejection_reason')
        )
        return Response({'booking': BookingSerializer(booking).data}, status=status.HTTP_200_OK)
