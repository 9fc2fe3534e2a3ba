"""ORM Models: SQLAlchemy declarative models.

All models imported here so Base.metadata is populated before create_all runs.
"""

from items_api.models.item import Item  # noqa: F401
