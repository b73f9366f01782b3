"""
Custom URL patterns for testing
"""
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('lti_provider.urls', namespace='lti_provider')),
]
