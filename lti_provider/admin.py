"""
Admin views for LTI related models.
"""
from django.contrib import admin

from lti_provider.models import LtiConsumer


class LtiConsumerAdmin(admin.ModelAdmin):
    """
    Admin view for LtiConsumer models.

    The shared secret is editable but never listed.
    """
    list_display = ('consumer_name', 'consumer_key')
    search_fields = ['consumer_name', 'consumer_key']


admin.site.register(LtiConsumer, LtiConsumerAdmin)
