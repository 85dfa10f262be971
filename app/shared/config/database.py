# 📄 File: app/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# The shared foundation every database table in the User Subscriptions service is built on,
# so that constraint and index names look the same everywhere.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy declarative base with a deterministic constraint naming convention,
# shared by the ORM models, Alembic autogenerate and the test schema bootstrap.
#
# 🔗 Dependencies:
# - SQLAlchemy declarative base and metadata
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.infrastructure.database.models
# - migrations/env.py
# - tests/conftest.py

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class DatabaseBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.
    """
    metadata = metadata
