"""Payslip Inbox - extract, rename and convert emailed payslips."""
