# blogapi/models/__init__.py
"""
Modelos de la aplicación.
Se importan aquí para poder usarlos como:
from blogapi.models import Blog, User
"""
from .user import User
from .blog import Blog

__all__ = ["Blog", "User"]
