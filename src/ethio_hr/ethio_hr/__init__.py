"""Ethio HR attendance & payroll core.

This package is organized by feature modules (ethiopian_calendar, geofence,
attendance, leave, employees, payroll) with a thin Flask controller layer and
service/repository layers. The reconciliation and payroll algorithms operate on
in-memory collections that services fetch from repositories beforehand.
"""
