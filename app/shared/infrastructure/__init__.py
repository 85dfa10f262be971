"""
Infrastructure layer package for the User Subscriptions service.
Provides the database engine, session management and integrity-error translation.
"""

__all__ = []
