# 📄 File: app/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes everything about users and the subscriptions they hold: the rules, the storage and the web endpoints
# 🧪 Purpose (Technical Summary):
# Package initialization for the user management module, layered as domain (models, services,
# repository interfaces), infrastructure (SQLAlchemy) and presentation (FastAPI routers, schemas)
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, app.shared.core
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, migrations/env.py

"""
User Management Module

Architecture follows Domain-Driven Design:
- Domain: User and Subscription entities, business rules, repository interfaces
- Infrastructure: SQLAlchemy models and repository implementations
- Presentation: API endpoints and request/response schemas

Business rules:
- Usernames are unique and never blank
- Subscription names are unique per user
- Deleting a user removes their subscriptions
- Stale writes are rejected through per-row versions
"""

__version__ = "1.0.0"
__module_name__ = "user_management"
