"""Core module - error taxonomy shared by services and the HTTP layer."""
