"""
Command-line interface modules.

Provides CLI entry points for:
- api_server: Start the REST API
- aggregate: Print a city's listing aggregate
- match: Rank cities against a set of preferences
"""
