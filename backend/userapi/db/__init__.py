"""Database Metadata: declarative base shared by models and the session manager."""
