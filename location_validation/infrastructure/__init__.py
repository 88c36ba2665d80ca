"""
Infrastructure layer.

SQLAlchemy-backed implementations of the application protocols.
"""
