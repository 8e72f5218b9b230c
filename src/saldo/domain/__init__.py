"""Domain layer for saldo application.

Services are imported from their own modules (``saldo.domain.transaction``
and so on) so that the database layer can import entities from here
without a cycle.
"""
