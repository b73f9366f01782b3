"""
Runtime will load the LTI provider Django application from here.
"""
__version__ = '1.0.0'
