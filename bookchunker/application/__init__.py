"""
Application layer: per-document services and the batch orchestrator.
"""
