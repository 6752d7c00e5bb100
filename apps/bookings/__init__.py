"""Bookings app package.

This app encapsulates the booking lifecycle: the booking aggregate and
its state machine, the lifecycle controller that applies transitions
with optimistic locking, and the request flow that creates bookings.
Domain events raised here drive notifications and coupon issuance.
"""
