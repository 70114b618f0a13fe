"""
Core domain layer: chunking algorithm, metadata scraping, exceptions.

Dependencies: None outside the standard library
System role: Pure business logic shared by services, workers and CLI
"""
