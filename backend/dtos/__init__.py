"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple the API layer from the database models.
DTOs prevent leaking database structure to external APIs and allow independent evolution.

Structure:
- request/: base DTO shapes with validation metadata, accepted at the API boundary
- response/: flat read views that embed lists of related base DTOs
"""
