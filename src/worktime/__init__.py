"""Worktime package.

Employee time tracking organized by feature modules (employees, time_entries,
reports, dashboard, users) with a thin Flask JSON controller layer on top of
service/repository layers.
"""
