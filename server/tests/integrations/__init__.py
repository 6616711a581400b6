"""
Integration test modules

Tests for payment gateway response decoding:
- JSON response families
- NVP responses
- Gateway error signalling
"""
