# Repositories package init
"""
Case API: Repository Layer
============================

What:  The store contract: one class per table, one query per operation.
Why:   Services decide WHICH lookup to run; repositories know HOW to run it.

Repository Inventory:
    - CaseRepository: insert, delete-by-id, find-by-id, ordered full scan,
      and the case-number / title filtered lookups
"""
