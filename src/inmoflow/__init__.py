"""
InmoFlow AI: matching, tasación y textos comerciales para un CRM inmobiliario.
"""

__version__ = "0.1.0"
