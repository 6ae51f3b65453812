"""Bookings app package.

This app encapsulates the booking domain: the booking model and its
WAITING -> APPROVED | REJECTED lifecycle, the owner's decision, and the
state-filtered, page-based listings for bookers and item owners. Writes run
in one transaction; the owner's decision locks the booking row so that a
booking is decided at most once.
"""
