from rest_framework import serializers
from users.models import User


class AdminUserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['id', 'name', 'email', 'phone', 'role', 'status', 'date_joined']
        read_only_fields = fields


class UserSummarySerializer(serializers.ModelSerializer):
    """Public identity attached to cars, bookings and testimonials."""
    class Meta:
        model = User
        fields = ['id', 'name', 'email']
        read_only_fields = fields
