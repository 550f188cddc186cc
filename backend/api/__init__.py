"""
DonorLink API package.

Provides the FastAPI application for the DonorLink blood donation service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
