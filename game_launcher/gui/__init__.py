"""
Qt user interface for the launcher.
"""
