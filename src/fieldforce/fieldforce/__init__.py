"""FieldForce API package.

This package is organized by feature modules (users, employees, customers,
feedback, attendance, ads) with a thin Flask controller layer on top of
service/repository layers.
"""
