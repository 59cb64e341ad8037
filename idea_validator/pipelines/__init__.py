"""Pipelines: result normalization, idea submission and history loading."""
