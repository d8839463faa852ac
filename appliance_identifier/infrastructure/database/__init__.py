"""
Database package - Infrastructure Layer

MongoDB connection wrapper used by the appliance record store.
"""

from appliance_identifier.infrastructure.database.mongo_database import MongoDatabase

__all__ = ["MongoDatabase"]
