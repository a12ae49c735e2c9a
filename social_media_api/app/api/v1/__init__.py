"""
Version 1 of the API.

This subpackage bundles the account and message endpoints.
"""
