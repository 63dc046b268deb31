# server/database/__init__.py
"""
Game database package.
Exposes the data accessors that plugins receive from the host.
"""
from .lazy_load import LazyLoad
from .database_service import DatabaseService
from .locale_service import LocaleService
