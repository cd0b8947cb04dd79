"""Services module for the Movie Booking API.

Services hold the business rules. They receive their repositories through
the constructor, validate every input before touching persistence, and
raise the exceptions defined in ``exceptions.services``.
"""
