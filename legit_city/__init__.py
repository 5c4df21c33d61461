"""
Legit City portal backend.
The HTTP surface lives in `legit_city.api`; settings, logging, and table definitions in `legit_city.common`.
"""
