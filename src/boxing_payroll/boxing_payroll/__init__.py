"""Boxing Payroll package.

This package is organized by feature modules (staff, payroll) with a thin
Flask controller layer over the service/registry layers.
"""
