"""
Pydantic schema definitions for API payloads.

Careers are free-form field mappings and only need a couple of
response models; subjects have a fixed core of fields and get full
request/response models.
"""
