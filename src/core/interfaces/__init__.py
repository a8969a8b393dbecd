"""Core contracts (Protocols).

Adapters implement these so the orchestrator can be driven by a real HTTP
executor or by an in-memory fake in tests.
"""
