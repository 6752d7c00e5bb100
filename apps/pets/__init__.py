"""Pets app package.

Pet records registered by owners. Bookings reference pets by id and
require every booked pet to belong to the requesting owner.
"""
