# 📄 File: app/shared/infrastructure/database/errors.py
#
# 🧭 Purpose (Layman Explanation):
# Reads the database's complaint when a write is refused and works out which rule was broken,
# for example "that name is taken" versus "that user does not exist".
#
# 🧪 Purpose (Technical Summary):
# Maps SQLAlchemy IntegrityError instances onto the storage-level exception classes,
# using the PostgreSQL SQLSTATE when the driver exposes it and the SQLite message otherwise.
#
# 🔗 Dependencies:
# - sqlalchemy.exc
# - app.shared.core.exceptions
#
# 🔄 Connected Modules / Calls From:
# - User and subscription repository implementations

from typing import Optional

from sqlalchemy.exc import IntegrityError

from app.shared.core.exceptions import (
    ForeignKeyViolation,
    RepositoryError,
    UniqueConstraintViolation,
)

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def _sqlstate(error: IntegrityError) -> Optional[str]:
    original = error.orig
    return getattr(original, "sqlstate", None) or getattr(original, "pgcode", None)


def translate_integrity_error(
    error: IntegrityError,
    operation: str,
    entity: str,
) -> RepositoryError:
    """
    Classify a constraint failure raised by a flush.

    Args:
        error: The IntegrityError raised by SQLAlchemy
        operation: Repository operation name, for logs
        entity: Table/entity the write targeted

    Returns:
        UniqueConstraintViolation, ForeignKeyViolation or a plain RepositoryError
    """
    code = _sqlstate(error)
    text = str(error.orig).lower()

    if code == UNIQUE_VIOLATION or "unique" in text:
        return UniqueConstraintViolation(
            f"Unique constraint violated on {entity}",
            operation=operation,
            entity=entity,
            constraint="unique",
        )

    if code == FOREIGN_KEY_VIOLATION or "foreign key" in text:
        return ForeignKeyViolation(
            f"Foreign key constraint violated on {entity}",
            operation=operation,
            entity=entity,
            constraint="foreign_key",
        )

    return RepositoryError(
        f"Integrity error on {entity}: {error.orig}",
        operation=operation,
        entity=entity,
    )
