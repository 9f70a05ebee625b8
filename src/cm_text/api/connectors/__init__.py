"""Connectors - adapters de borda para APIs externas."""

__all__: list[str] = []
