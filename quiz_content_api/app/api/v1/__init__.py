"""
Version 1 of the API.

This subpackage bundles the public game endpoints (categories and
questions) and the administrative category endpoints.
"""
