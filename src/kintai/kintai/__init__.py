"""Kintai attendance & leave API.

Feature packages (users, attendance, leaves) each carry a plain domain model,
a repository interface with its MySQL implementation, a service holding the
business rules and a thin Flask controller exposing JSON endpoints.
"""
