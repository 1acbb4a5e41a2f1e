"""
Application entry points.
"""
