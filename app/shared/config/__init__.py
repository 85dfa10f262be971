# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell the service how to reach its database and how to behave.
#
# 🧪 Purpose (Technical Summary):
# Configuration package exporting the pydantic-settings Settings model and its cached accessor.
#
# 🔗 Dependencies:
# - settings.py (application settings)
# - database.py (declarative base and naming conventions)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - migrations/env.py
# - Infrastructure components

from .settings import Settings, get_settings

__all__ = [
    "get_settings",
    "Settings",
]
