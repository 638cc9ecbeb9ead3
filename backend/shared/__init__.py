"""
Shared module for code that has no knowledge of the HTTP layer.

STRUCTURE:
- shared.config: Configuration
  - settings.py: Environment config (pydantic-settings)
  - logging.py: Structured logging
  - constants.py: Fixed messages and limits

- shared.domain: Domain building blocks
  - notifications.py: Notification, Notifiable
  - contract.py: Fluent validation rules
  - value_objects.py: Email

- shared.infrastructure: Database and request correlation
  - db.py: SQLAlchemy engine, sessions, safe_commit()
  - correlation.py: X-Request-ID middleware and logging filter

- shared.utils: Utilities
  - exceptions.py: HTTP exceptions with auto-logging
  - validators.py: Search term normalization

IMPORT EXAMPLES:
    from shared.domain import Notifiable, Contract, Email
    from shared.infrastructure.db import get_db, safe_commit
    from shared.config.settings import settings
    from shared.config.constants import Messages, Limits
    from shared.utils.exceptions import DatabaseError
"""
