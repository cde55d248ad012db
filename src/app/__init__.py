"""Book catalog service.

Stores book records and exposes create, read, update, delete, search and
author aggregation over HTTP. The data access layer lives in
``src.app.entities.service.book``.
"""

__version__ = "0.1.0"
