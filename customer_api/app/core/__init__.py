"""
Cross-cutting pieces: configuration, logging, database helpers and
domain exceptions.
"""
