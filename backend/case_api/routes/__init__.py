# Routes package init
"""
Case API: API Routes Package
==============================

Route Inventory:
    - cases.py:   GET    /case/getAllCases
                  POST   /case/addCase
                  GET    /case/searchCases
                  GET    /case/{id}
                  DELETE /case/{id}
    - health.py:  GET    /health

Routes are THIN: extract input, call CaseService, shape the response.
"""
