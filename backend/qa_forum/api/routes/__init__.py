"""Routers included by main.create_app(): health probes and /api/v1/questions."""
