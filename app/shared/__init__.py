# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package holding the pieces every part of the
# service relies on: settings, errors, database access and logging.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, the exception hierarchy, database
# infrastructure and structured logging.
#
# 🔄 Connected Modules / Calls From:
# - app.main, app.api, app.modules.user_management

__all__ = []
