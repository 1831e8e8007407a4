"""
URL configuration for the delivery router API.

This module defines the URL patterns for the delivery tour API endpoints.
"""
from django.urls import path
from delivery_router.api.views import DeliveryTourView, health_check

app_name = 'delivery_router'

urlpatterns = [
    # Health check endpoint
    path('health/', health_check, name='health_check_get'),

    # Tour calculation endpoint
    path('tour/', DeliveryTourView.as_view(), name='delivery_tour_read'),
]
