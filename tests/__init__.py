# BigNum Test Suite
"""
Test suite including:
- Unit tests for the core arithmetic and number theory
- Cross-checks against Python int and the cryptography package
- Shell, demo and command line tests

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
