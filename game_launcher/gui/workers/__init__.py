"""
Background workers that keep the window responsive.
"""

from .update_worker import UpdateWorker

__all__ = ["UpdateWorker"]
