"""
Application services.

- crud: generic CrudService contract, SQLAlchemy unit of work, repository
- domain: per-entity services with business rules
"""
