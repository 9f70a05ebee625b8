"""Camada app: contratos e orquestração."""
