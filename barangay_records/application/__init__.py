"""
Application layer for the Barangay Records application.

Holds the authorization core (identity resolution, role policy, tenant
scope, admission and ownership checks) and credential issuance.
"""
