"""Test suite for objc-type-encoding.

Test Structure:
- domain/models/: Tests for the TypeNode tree and runtime info records
- domain/services/parsing/: Tests for the decoder, cursor and splitters
- domain/services/generation/: Tests for encoding and declaration rendering
- infrastructure/: Tests for configuration and logging
- test_cli.py: End-to-end tests of the command line entry point

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run command line tests only
"""
