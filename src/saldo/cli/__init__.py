"""CLI layer for saldo."""
