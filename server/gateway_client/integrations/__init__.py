"""
Integration modules for the gateway client

Contains decoders for external systems:
- Payment gateway transaction API responses (JSON and NVP)
"""
