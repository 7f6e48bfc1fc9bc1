from django.contrib import admin

from . import services
from .models import Car, CarFeature


class CarFeatureInline(admin.TabularInline):
    model = CarFeature
    extra = 1


@admin.register(Car)
class CarAdmin(admin.ModelAdmin):
    list_display = ('brand', 'model', 'year', 'owner', 'price', 'status', 'available')
    list_filter = ('status', 'available', 'category', 'brand', 'year')
    search_fields = ('brand', 'model', 'owner__email', 'owner__name')
    inlines = [CarFeatureInline]
    actions = ['approve_cars', 'reject_cars']

    def get_readonly_fields(self, request, obj=None):
        # The owner is fixed once the listing exists.
        if obj is not None:
            return ('owner', 'created_at', 'updated_at')
        return ('created_at', 'updated_at')

    def approve_cars(self, request, queryset):
        for car in queryset:
            services.approve_car(request.user, car.pk)
    approve_cars.short_description = "Approve selected cars"

    def reject_cars(self, request, queryset):
        for car in queryset:
            services.reject_car(request.user, car.pk)
    reject_cars.short_description = "Reject selected cars"
