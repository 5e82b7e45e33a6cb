"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and value semantics
    - formatting: Leading-marker emphasis rule and HTML rendering
    - config/session: Environment loading and the persisted flag
    - state/: Observable base; chat, document and auth controllers with fake transports
"""
