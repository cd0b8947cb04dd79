"""Security module for the Movie Booking API.

This module provides security functionality for the application,
including JWT token management, password hashing, and route-level
authorization.

The module includes:
- JWTManagerInterface: Abstract interface for JWT operations
- JWTManager: JWT access token implementation backed by python-jose
- Password hashing and verification utilities (bcrypt via passlib)
- Identity, capabilities and the route policy table

The module supports stateless authentication through bearer tokens
and bcrypt password hashing for user security.
"""
