"""Reservations app package.

Date-range bookings of places. A place can hold at most one reservation
on any given day, check-out day included.
"""
