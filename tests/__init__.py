"""Test suite for authgate.

- unit/: decision logic, validators, adapters in isolation
- integration/: the enforcer through the ASGI stack with TestClient
"""
