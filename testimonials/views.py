from rest_framework import generics
from rest_framework.permissions import AllowAny, IsAuthenticated

from .models import Testimonial
from .serializers import TestimonialSerializer


class TestimonialListCreateAPIView(generics.ListCreateAPIView):
    queryset = Testimonial.objects.select_related('user')
    serializer_class = TestimonialSerializer

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAuthenticated()]

    def perform_create(self, serializer):
        serializer.save(user=self.request.user)
