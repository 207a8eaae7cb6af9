"""Attendance Roster package.

Feature modules (employees, attendance) each carry a thin Flask controller
over service/repository layers; roster upload reconciliation lives in
`employees.reconciliation` as pure logic.
"""
