"""
Configuration package for the pizza sales dashboard.
"""
