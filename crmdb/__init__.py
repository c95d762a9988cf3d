"""Database package for the CRM junction layer."""
from crmdb.connection import dispose_engine, get_db, get_engine, init_engine

__all__ = ["init_engine", "get_engine", "get_db", "dispose_engine"]
