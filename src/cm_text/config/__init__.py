"""Configuração: settings do gateway e logging."""
