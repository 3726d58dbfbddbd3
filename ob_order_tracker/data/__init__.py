"""
Data access package: models, connectors and repositories.
"""
