# cars/serializers.py
import json

from rest_framework import serializers

from users.serializers import UserSummarySerializer
from .models import Car


class FeatureListField(serializers.ListField):
    """
    Ordered list of feature names.

    Multipart forms send the list either as repeated ``features`` values or
    as a single JSON array string; both are accepted.
    """
    child = serializers.CharField(max_length=100)
    default_error_messages = {
        'invalid_json': 'Invalid JSON',
    }

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = [data]
        if (isinstance(data, list) and len(data) == 1
                and isinstance(data[0], str) and data[0].lstrip().startswith('[')):
            try:
                data = json.loads(data[0])
            except ValueError:
                self.fail('invalid_json')
        return super().to_internal_value(data)


class CarDraftSerializer(serializers.ModelSerializer):
    """Everything an owner may set on a listing, minus the image."""
    features = FeatureListField(required=False, default=list)
    year = serializers.IntegerField(min_value=1900)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    seats = serializers.IntegerField(min_value=1)

    class Meta:
        model = Car
        fields = [
            'brand', 'model', 'year', 'price', 'category', 'transmission',
            'fuel', 'seats', 'wilaya', 'commune', 'chauffeur', 'features',
        ]


class CarSerializer(serializers.ModelSerializer):
    owner = UserSummarySerializer(read_only=True)
    features = serializers.SlugRelatedField(many=True, read_only=True, slug_field='name')

    class Meta:
        model = Car
        fields = [
            'id', 'owner', 'brand', 'model', 'year', 'price', 'image',
            'category', 'transmission', 'fuel', 'seats', 'available',
            'features', 'wilaya', 'commune', 'chauffeur', 'rating',
            'status', 'rejection_reason', 'created_at', 'updated_at',
        ]
        read_only_fields = fields


class CarRejectionSerializer(serializers.Serializer):
    rejection_reason = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    definitive = serializers.BooleanField(required=False, default=False)


class CarDeleteByIdsSerializer(serializers.Serializer):
    ids = serializers.ListField(child=serializers.JSONField(), allow_empty=False)
