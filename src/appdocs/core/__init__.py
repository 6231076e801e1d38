"""
Core domain models, portfolio math and record contracts.

This module contains the building blocks that are independent of the
rendering stack (templates, PDF engine, storage).
"""
