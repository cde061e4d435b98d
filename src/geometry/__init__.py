# geometry/__init__.py
