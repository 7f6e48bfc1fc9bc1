from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ('user', 'car', 'owner', 'start_date', 'end_date', 'total_amount', 'status')
    list_filter = ('status', 'payment_method', 'start_date')
    search_fields = ('user__email', 'car__brand', 'car__model', 'owner__email')
    # Admins oversee bookings; the workflow belongs to customers and owners.
    readonly_fields = [f.name for f in Booking._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
