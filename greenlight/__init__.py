"""
Greenlight Permit Backend - root package.

This package contains the application bootstrap (main.py), domain logic
for time-boxed permits, infrastructure (MongoDB, in-memory stores, photo
lookup), dependency wiring, and the VizHash image generator that renders
the human-verifiable pattern shown on every permit.
"""
