"""Shared utilities (UTC time, logging) used across layers."""
