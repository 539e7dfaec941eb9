"""Aggregation module for applicant and college views.

- Groups, ranks and projects application records
- Writes the college-grouped view to a JSON backup file
- Forbidden: inserting applications
"""
