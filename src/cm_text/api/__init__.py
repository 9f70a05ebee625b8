"""Camada api: validação, payload, transporte e mapeamento de resposta."""
