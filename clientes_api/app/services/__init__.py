"""
Service layer.

``validation`` checks incoming customer data; ``cliente_service`` owns
the stored records.  Endpoints only translate their results to HTTP.
"""
