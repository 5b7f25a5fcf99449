"""Core domain layer: entities, interfaces and pure ledger services."""
