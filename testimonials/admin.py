from django.contrib import admin

from .models import Testimonial


@admin.register(Testimonial)
class TestimonialAdmin(admin.ModelAdmin):
    list_display = ('name', 'location', 'rating', 'user', 'created_at')
    list_filter = ('rating',)
    search_fields = ('name', 'location', 'user__email')
