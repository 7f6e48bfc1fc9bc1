from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from . import services
from .forms import AdminUserChangeForm, AdminUserCreationForm
from .models import User


class CustomUserAdmin(UserAdmin):
    form = AdminUserChangeForm
    add_form = AdminUserCreationForm
    list_display = ('email', 'name', 'phone', 'role', 'status', 'date_joined')
    list_filter = ('role', 'status', 'is_staff')
    search_fields = ('email', 'name', 'phone')
    ordering = ('-date_joined',)
    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Profile', {'fields': ('name', 'phone', 'role', 'status')}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        ('Dates', {'fields': ('last_login', 'date_joined')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'name', 'phone', 'role', 'password1', 'password2'),
        }),
    )
    actions = ['approve_owners']

    def approve_owners(self, request, queryset):
        for user in queryset.filter(role=User.Role.OWNER):
            services.approve_owner(request.user, user.pk)
    approve_owners.short_description = "Approve selected owners"


admin.site.register(User, CustomUserAdmin)
