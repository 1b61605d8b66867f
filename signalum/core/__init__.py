"""Core data model: samples, descriptors, buffer, errors."""
