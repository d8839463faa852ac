"""
Application Layer Package

Use cases orchestrating the domain ports, and the DTOs exchanged with
the presentation layer.
"""
