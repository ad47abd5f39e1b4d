"""Shared config, logging and HTTP plumbing for the services."""
