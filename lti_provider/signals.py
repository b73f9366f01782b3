"""
LTI provider signals
"""
from django.dispatch import Signal

# Sent after a launch session has been stored, with the arguments:
# session_key (str), launch_session (LaunchSession)
LTI_1P1_LAUNCH_ADMITTED = Signal()
