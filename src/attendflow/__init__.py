"""AttendFlow package.

Feature modules (locations, employees, attendance, payroll, ...) sit on top of
an in-memory ledger, with a thin Flask API layer.
"""
