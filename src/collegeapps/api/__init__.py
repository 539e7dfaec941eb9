"""API module for college applications.

API layer:
- Validates inputs, builds the store for each request
- Translates core results into HTTP responses
- Forbidden: grouping/ranking logic, direct SQL
"""
