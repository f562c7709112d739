"""Duplicate-word scanner: discovery, line state, detection and filtering."""
