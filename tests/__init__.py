"""
Test suite for appdocs

Contains:
- tests/unit/ : Unit tests for individual modules and the assembled pipeline
"""
