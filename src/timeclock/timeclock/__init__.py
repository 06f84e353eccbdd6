"""Timeclock package.

Reconciles punch-clock spreadsheet exports against contractual schedules.
Organized by feature modules (reconciliation, attendance, preferences, ...)
with a thin Flask controller layer over service/repository layers.
"""
