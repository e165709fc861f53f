"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that rejected parameters
are consistently translated into API responses.
"""
