"""Configuration module for the Movie Booking API.

This module contains all configuration settings and dependency injection
functions for the application. It provides:

- Application settings management with environment variable support
- Dependency injection functions wiring repositories into services
- JWT token management configuration
- Route-level authorization based on the policy table
- Structured logging setup

The module uses Pydantic settings for type-safe configuration management
and automatic environment variable loading.
"""
