# Routes package init
"""
Food Circle Backend — API Routes Package
=========================================

Route Inventory:
    - session.py:   POST /jwt, GET /logout
    - foods.py:     GET /foods, GET /all-foods, GET /food/{id}, POST /foods,
                    PATCH /requestFoods/{id}, GET /food-manage/{email},
                    PUT /update-food/{id}, DELETE /delete-food/{id}
    - requests.py:  GET /my-request/{email}, POST /food-request
    - health.py:    GET /, GET /health

Routes are thin: extract the request values, call one service method,
return its result. Auth is a dependency (auth.require_session).
"""
