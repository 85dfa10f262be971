# 📄 File: app/modules/user_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the API endpoints for user management by version.
#
# 🧪 Purpose (Technical Summary):
# API package initialization grouping versioned routers and the pydantic schemas they use.
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router

__all__ = []
