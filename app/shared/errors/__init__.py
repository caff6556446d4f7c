"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that catalog domain errors
are consistently translated into the API error envelope.
"""
