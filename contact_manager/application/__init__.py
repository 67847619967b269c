"""Application layer: DTOs, repository ports, and RBAC services."""
