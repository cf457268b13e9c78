"""
Data access layer: record models, dataset connectors and repositories.
"""
