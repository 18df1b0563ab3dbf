"""Domain layer - Pure business logic.

Entities, value objects, protocols (ports), validators, and error messages for
the authentication core. No framework or infrastructure dependencies.

Structure:
- entities/: User (account) entity with lockout rules
- enums/: UserRole
- errors/: Authentication error messages
- protocols/: Ports implemented by infrastructure
- validators/: Email and password-strength rules
- value_objects/: Token payloads and password-strength reports
"""
