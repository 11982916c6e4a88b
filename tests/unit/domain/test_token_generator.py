from uuid import UUID

from src.app.services.token_generator import TokenGenerator


def test_tokens_are_unique():
    generator = TokenGenerator()

    tokens = [generator.generate() for _ in range(10_000)]

    assert len(set(tokens)) == len(tokens)


def test_token_is_url_safe_uuid4():
    token = TokenGenerator().generate()

    assert UUID(token).version == 4
    assert all(c in "0123456789abcdef-" for c in token)
