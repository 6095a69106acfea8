# services/__init__.py
"""
Client-side services for the road hazard map
"""

from .app_controller import AppController, build_app_controller

__all__ = ['AppController', 'build_app_controller']
