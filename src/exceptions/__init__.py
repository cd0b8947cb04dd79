"""Custom exceptions module for the Movie Booking API.

This module contains all custom exception classes used throughout the application.
These exceptions provide specific error handling for different domains:

- Security exceptions for token validation errors
- Service exceptions for validation, lookup and credential errors

Routers and the authorization dependency translate these exceptions into
HTTP responses, so no internal detail reaches the client.
"""
