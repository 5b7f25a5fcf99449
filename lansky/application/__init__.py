"""Application layer: ledger store, DTOs and use cases."""
