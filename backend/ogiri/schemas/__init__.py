"""Schemas — pydantic models shared by API boundaries, stores, and the data file."""
