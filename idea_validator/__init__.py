"""Idea Validator: AI-assisted product idea evaluation and analytics service."""
