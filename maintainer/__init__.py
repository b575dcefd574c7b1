"""Access maintainer: Role, RoleOption and User CRUD services."""
