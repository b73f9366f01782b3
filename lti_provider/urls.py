"""
URL mappings for the LTI provider.
"""
from django.urls import path

from lti_provider.views import launch_endpoint

app_name = 'lti_provider'
urlpatterns = [
    path(
        'lti_provider/v1/launch',
        launch_endpoint,
        name='lti_provider.launch'
    ),
]
