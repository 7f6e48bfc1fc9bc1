from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from api.exceptions import ValidationError
from api.permissions import IsAdmin, IsOwner

from . import services
from .serializers import CarDeleteByIdsSerializer, CarRejectionSerializer, CarSerializer


class CarListCreateAPIView(APIView):
    """Public catalogue of approved cars; owners POST new listings here."""
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsOwner()]

    def get(self, request):
        cars = services.list_approved_cars()
        serializer = CarSerializer(cars, many=True, context={'request': request})
        return Response(serializer.data)

    def post(self, request):
        car = services.submit_car(request.user, request.data, request.FILES.get('image'))
        serializer = CarSerializer(car, context={'request': request})
        return Response({'car': serializer.data}, status=status.HTTP_201_CREATED)


class OwnerCarListAPIView(APIView):
    permission_classes = [IsOwner]

    def get(self, request):
        cars = services.list_owned_cars(request.user)
        serializer = CarSerializer(cars, many=True, context={'request': request})
        return Response(serializer.data)


class PendingCarListAPIView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        cars = services.list_pending_cars(request.user)
        serializer = CarSerializer(cars, many=True, context={'request': request})
        return Response(serializer.data)


class CarApproveAPIView(APIView):
    permission_classes = [IsAdmin]

    def put(self, request, car_id):
        car = services.approve_car(request.user, car_id)
        return Response({'car': CarSerializer(car, context={'request': request}).data})


class CarRejectAPIView(APIView):
    permission_classes = [IsAdmin]

    def put(self, request, car_id):
        serializer = CarRejectionSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationError(serializer.errors)
        car = services.reject_car(
            request.user,
            car_id,
            reason=serializer.validated_data.get('rejection_reason'),
            definitive=serializer.validated_data['definitive'],
        )
        return Response({'car': CarSerializer(car, context={'request': request}).data})


class CarEditAPIView(APIView):
    permission_classes = [IsOwner]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def put(self, request, car_id):
        car = services.edit_car(request.user, car_id, request.data, request.FILES.get('image'))
        return Response({'car': CarSerializer(car, context={'request': request}).data})


class CarDeleteByIdsAPIView(APIView):
    permission_classes = [IsAdmin]

    def post(self, request):
        serializer = CarDeleteByIdsSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationError(serializer.errors)
        result = services.delete_cars_by_ids(request.user, serializer.validated_data['ids'])
        return Response({'message': 'Cars deleted successfully', **result}, status=status.HTTP_200_OK)
