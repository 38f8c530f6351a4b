"""Delegate Playground core: contracts, domain models, config and services."""
