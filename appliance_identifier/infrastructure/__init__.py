"""
Infrastructure Layer Package

Concrete adapters for the domain ports: MongoDB and in-memory record
stores, the bundled reference table, the classifier bridge, the image
encoder and health checks.
"""
