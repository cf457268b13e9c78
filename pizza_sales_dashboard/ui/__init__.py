"""
Streamlit presentation layer for the pizza sales dashboard.
"""
