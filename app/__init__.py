# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python that the 'app' folder holds the User Subscriptions service code
# and records the package version.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version metadata for the
# User Subscriptions FastAPI service.
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)

"""
User Subscriptions API

Users with unique usernames, the subscriptions they hold, and a popularity
ranking of subscription names, served over HTTP.
"""

__version__ = "1.0.0"
__title__ = "User Subscriptions API"
__description__ = "CRUD API for users and their subscriptions"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
