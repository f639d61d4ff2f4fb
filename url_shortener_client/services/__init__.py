"""
Services module for the client operations.

This module contains the API client and the analytics renderer, keeping
them separate from request building and response schemas.
"""
