"""Report template service package.

Holds the domain model, use cases, persistence and HTTP layers used to manage
uploaded ``.jrxml`` report templates.
"""
