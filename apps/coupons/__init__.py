"""Coupons app package.

Hosts earn one discount coupon for every completed booking. Coupons are
issued when a booking completes and listed on the host's coupon page.
"""
