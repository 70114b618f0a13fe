"""
Boundary layer: adapters to the database and the on-disk corpus.
"""
