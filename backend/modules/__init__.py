# backend/modules/__init__.py
