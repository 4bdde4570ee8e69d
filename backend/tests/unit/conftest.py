"""Unit test configuration.

Unit tests build services directly and do not depend on app.py or
external services.
"""
