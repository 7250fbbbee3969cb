"""
Formula Pad web dashboard (Flask + Flask-SocketIO).
"""

from .app import create_app

__all__ = ['create_app']
