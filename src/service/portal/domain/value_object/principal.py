import attrs


@attrs.frozen
class Principal:
    """Authenticated caller, decoded once from the bearer token."""

    user_id: int
    username: str
    role: int

    def has_any_role(self, roles: frozenset[int]) -> bool:
        return self.role in roles
