"""Orchestration services driven by the commands."""
