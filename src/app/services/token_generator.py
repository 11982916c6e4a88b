import uuid


class TokenGenerator:
    """
    Produces summons tokens.

    A token is the only credential needed to resolve a summons, so it comes
    from a v4 UUID (122 random bits from the OS secure random source).
    """

    def generate(self) -> str:
        return str(uuid.uuid4())
