"""Infrastructure: database pool and logging setup.

Invariants:
    - Single async engine per application instance (DatabaseSessionManager)
    - All sessions are async (AsyncSession)
"""
