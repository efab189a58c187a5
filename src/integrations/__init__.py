"""
Integrations for external services and APIs.

This package contains the GitHub GraphQL integration.
"""
