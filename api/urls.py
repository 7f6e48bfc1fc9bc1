from django.urls import path

from .views import LoginView, ProfileView, RegisterView
from cars.views import (CarListCreateAPIView, OwnerCarListAPIView,
                        PendingCarListAPIView, CarApproveAPIView,
                        CarRejectAPIView, CarEditAPIView,
                        CarDeleteByIdsAPIView,
                        )
from bookings.views import (BookingListCreateAPIView, AdminBookingListAPIView,
                            OwnerPendingBookingsAPIView, BookingApproveAPIView,
                            BookingRejectAPIView,
                            )
from users.views import AdminUserListAPIView, OwnerApprovalAPIView, DeclineUserAPIView
from testimonials.views import TestimonialListCreateAPIView

urlpatterns = [
    # Authentication endpoints
    path('auth/register/', RegisterView.as_view(), name='register'),
    path('auth/login/', LoginView.as_view(), name='login'),
    path('auth/profile/', ProfileView.as_view(), name='profile'),

    # Car listings
    path('cars/', CarListCreateAPIView.as_view(), name='cars'),
    path('cars/owner/', OwnerCarListAPIView.as_view(), name='owner-cars'),
    path('cars/pending/', PendingCarListAPIView.as_view(), name='pending-cars'),
    path('cars/edit/<int:car_id>/', CarEditAPIView.as_view(), name='car-edit'),
    path('cars/approve/<int:car_id>/', CarApproveAPIView.as_view(), name='car-approve'),
    path('cars/reject/<int:car_id>/', CarRejectAPIView.as_view(), name='car-reject'),
    path('cars/delete-by-ids/', CarDeleteByIdsAPIView.as_view(), name='car-delete-by-ids'),

    # Bookings
    path('bookings/', BookingListCreateAPIView.as_view(), name='bookings'),
    path('bookings/all/', AdminBookingListAPIView.as_view(), name='all-bookings'),
    path('bookings/owner/pending/', OwnerPendingBookingsAPIView.as_view(), name='owner-pending-bookings'),
    path('bookings/<int:booking_id>/approve/', BookingApproveAPIView.as_view(), name='booking-approve'),
    path('bookings/<int:booking_id>/reject/', BookingRejectAPIView.as_view(), name='booking-reject'),

    # User approval
    path('users/', AdminUserListAPIView.as_view(), name='users'),
    path('users/approve/<int:user_id>/', OwnerApprovalAPIView.as_view(), name='user-approve'),
    path('users/decline/<int:user_id>/', DeclineUserAPIView.as_view(), name='user-decline'),

    path('testimonials/', TestimonialListCreateAPIView.as_view(), name='testimonials'),
]
