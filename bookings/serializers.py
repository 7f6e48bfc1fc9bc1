from rest_framework import serializers

from cars.models import Car
from users.serializers import UserSummarySerializer
from .models import Booking


class BookingRequestSerializer(serializers.Serializer):
    car_id = serializers.IntegerField()
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField()
    pickup_location = serializers.CharField(max_length=255)
    dropoff_location = serializers.CharField(max_length=255)
    additional_services = serializers.ListField(
        child=serializers.CharField(max_length=50), required=False, default=list
    )
    payment_method = serializers.ChoiceField(choices=Booking.PaymentMethod.choices)

    def validate_additional_services(self, value):
        # A set of codes, kept in the order the customer picked them.
        return list(dict.fromkeys(value))


class BookingCarSerializer(serializers.ModelSerializer):
    class Meta:
        model = Car
        fields = ['id', 'brand', 'model', 'owner']
        read_only_fields = fields


class BookingSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)
    car = BookingCarSerializer(read_only=True)

    class Meta:
        model = Booking
        fields = [
            'id', 'user', 'car', 'owner', 'start_date', 'end_date',
            'total_amount', 'status', 'pickup_location', 'dropoff_location',
            'additional_services', 'payment_method', 'rejection_reason',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class BookingRejectionSerializer(serializers.Serializer):
    rejection_reason = serializers.CharField(required=False, allow_blank=True, allow_null=True)
