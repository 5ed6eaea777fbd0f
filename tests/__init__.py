"""
Test package for the textmatcher selection matching library.

Run tests with:
    pytest tests/
"""
