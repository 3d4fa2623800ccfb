"""
pytest test suite for the Enum Options API backend.

Test categories:
- Unit tests: option builder, HTML helpers, controller base, services
- API tests: Full FastAPI app through httpx / TestClient
"""
