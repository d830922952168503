"""
Recipe API - FastAPI service for recipe management with JWT login.
"""
__version__ = "0.1.0"
