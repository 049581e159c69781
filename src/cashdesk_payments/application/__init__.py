"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: One class per payment lifecycle operation
- Ports: Abstract interfaces for the store, locking and time
- DTOs: Commands and filters handed in by the HTTP collaborator
- PaymentLifecycleService: Facade exposing the operations

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
