"""Repositories module for the Movie Booking API.

Each repository wraps an AsyncSession and exposes the CRUD operations one
aggregate needs. Mutating calls commit their own transaction and roll back
on database errors before re-raising.
"""
