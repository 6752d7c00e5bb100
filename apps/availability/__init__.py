"""Availability app package.

Date windows in which a host accepts pets, with the number of pets
they can take. Owners read them when choosing a host.
"""
