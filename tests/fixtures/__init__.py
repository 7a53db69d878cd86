"""Test fixture package for spatial-geocoder.

Contains fixtures for:
- Recorded provider responses (Esri, Google, HERE, TomTom, TAMU, Census)
"""
