# Services package init
"""
Food Circle Backend — Services Layer
=====================================

What:  Accessors sitting between routes (HTTP) and MongoDB (persistence).
How:   Each service is constructed with the collection it operates on and
       performs one driver call per operation.

Service Inventory:
    - CollectionService: shared id parsing, ownership check, result conversion
    - FoodService: `foods` catalog reads and writes
    - FoodRequestService: `foodRequest` inserts and per-user listing
    - TokenService: session token signing and verification
"""
