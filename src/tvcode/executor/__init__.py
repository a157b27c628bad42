"""Executors that hand synthesized commands to external tools."""
