"""
Test suite for the lecture exercises

Contains:
- tests/unit/          : Unit tests for numeric utilities, domain models,
                         lesson drivers and the CLI
"""
