"""Core value types, events and the battle resolution engine."""
