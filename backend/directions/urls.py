from django.urls import path

from .views import DirectionsRouteView

urlpatterns = [
    path('directions/route', DirectionsRouteView.as_view(), name='directions-route'),
]
