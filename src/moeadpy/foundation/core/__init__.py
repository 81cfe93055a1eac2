"""Run entry points and result containers."""
