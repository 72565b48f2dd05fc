"""
Service layer.

Services encapsulate the business rules for a domain.  Handlers in
``api/v1/endpoints`` call them and translate their results into HTTP
responses.
"""
