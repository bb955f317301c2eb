"""
Core infrastructure for Guildhall: configuration, logging and the event bus.
"""
