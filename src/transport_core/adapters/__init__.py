"""Adapters – integrations with HTTP frameworks and third-party clients."""
