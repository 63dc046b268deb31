# server/__init__.py
