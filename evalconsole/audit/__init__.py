"""Audit history of console evaluations."""
