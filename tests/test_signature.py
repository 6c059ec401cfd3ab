"""
Tests for webhook signature computation and verification.
"""
from hypothesis import given, settings
from hypothesis import strategies as st

from workflow_relay.webhook.signature import compute_signature, verify_signature


body_strategy = st.binary(min_size=1, max_size=512)
secret_strategy = st.text(
    alphabet=st.characters(min_codepoint=33, max_codepoint=126),
    min_size=1,
    max_size=64,
)


def flip_bit(data: bytes, index: int, bit: int) -> bytes:
    mutated = bytearray(data)
    mutated[index % len(mutated)] ^= 1 << bit
    return bytes(mutated)


def test_known_github_vector():
    # Example from GitHub's webhook documentation
    token = compute_signature(b"Hello, World!", "It's a Secret to Everybody")
    assert token == "sha256=757107ea0eb2509fc211221cce984b8a37570b6d7586c22c46f4379c8b043e17"


def test_token_format():
    token = compute_signature(b"{}", "secret")
    prefix, digest = token.split("=", 1)
    assert prefix == "sha256"
    assert len(digest) == 64
    assert digest == digest.lower()


@given(body=body_strategy, secret=secret_strategy)
@settings(max_examples=100)
def test_computed_token_verifies(body: bytes, secret: str) -> None:
    assert verify_signature(body, compute_signature(body, secret), secret)


@given(
    body=body_strategy,
    secret=secret_strategy,
    index=st.integers(min_value=0, max_value=511),
    bit=st.integers(min_value=0, max_value=7),
)
@settings(max_examples=100)
def test_body_bit_flip_fails(body: bytes, secret: str, index: int, bit: int) -> None:
    token = compute_signature(body, secret)
    assert not verify_signature(flip_bit(body, index, bit), token, secret)


@given(
    body=body_strategy,
    secret=secret_strategy,
    index=st.integers(min_value=0, max_value=63),
    bit=st.integers(min_value=0, max_value=6),
)
@settings(max_examples=100)
def test_secret_bit_flip_fails(body: bytes, secret: str, index: int, bit: int) -> None:
    token = compute_signature(body, secret)
    # ASCII secret with one of its low seven bits flipped stays ASCII
    mutated = flip_bit(secret.encode("ascii"), index, bit).decode("ascii")
    assert not verify_signature(body, token, mutated)


@given(body=st.binary(max_size=512), secret=secret_strategy)
@settings(max_examples=50)
def test_absent_token_never_verifies(body: bytes, secret: str) -> None:
    assert verify_signature(body, None, secret) is False
    assert verify_signature(body, "", secret) is False


def test_uppercase_digest_rejected():
    token = compute_signature(b"payload", "secret")
    assert not verify_signature(b"payload", token.upper(), "secret")


def test_missing_prefix_rejected():
    token = compute_signature(b"payload", "secret")
    assert not verify_signature(b"payload", token[len("sha256="):], "secret")


def test_non_ascii_token_rejected_without_error():
    assert not verify_signature(b"payload", "sha256=éé", "secret")
