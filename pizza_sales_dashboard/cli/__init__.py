"""
Command-line interface package.
"""
