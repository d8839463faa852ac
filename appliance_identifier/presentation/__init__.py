"""
Presentation Layer Package

FastAPI routers exposing the appliance identifier over HTTP.
"""
