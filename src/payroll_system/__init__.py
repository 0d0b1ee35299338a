"""Payroll System package.

This package is organized by feature modules (employees, attendance, payroll, ...)
with a thin console layer on top of pure service/calculator layers.
"""
