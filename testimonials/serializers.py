from rest_framework import serializers

from users.serializers import UserSummarySerializer
from .models import Testimonial


class TestimonialSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)

    class Meta:
        model = Testimonial
        fields = ['id', 'user', 'name', 'location', 'rating', 'comment', 'avatar', 'created_at']
        read_only_fields = ['id', 'user', 'created_at']
