"""
Feature services: bookings, catalog, accounts and payments.
"""
