"""
FastAPI proxy service for FootyCast.

Holds the provider credential and forwards today's predictions to the UI.
"""
