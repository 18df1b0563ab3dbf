"""Infrastructure adapters (bcrypt, PyJWT, AES-GCM, structlog, stores, resilience)."""
