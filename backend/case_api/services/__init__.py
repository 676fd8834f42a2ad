# Services package init
"""
Case API: Services Layer
==========================

What:  Business logic layer sitting between routes (HTTP) and repositories.
How:   Services accept request schemas, apply business rules, call the
       repository, and return response schemas.

Service Inventory:
    - CaseService: create validation, default createdDate, search dispatch
"""
