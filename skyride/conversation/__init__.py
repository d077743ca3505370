"""Conversation state: models and session storage."""
