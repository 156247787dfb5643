"""Tests for signed OAuth state values."""

import pytest

from mailrelay.core import InvalidStateError
from mailrelay.services import decode_state, encode_state


def test_roundtrip():
    assert decode_state(encode_state("user-1")) == "user-1"


def test_other_key_is_rejected():
    state = encode_state("user-1", secret_key="another-secret")

    with pytest.raises(InvalidStateError):
        decode_state(state)


def test_expired_state():
    state = encode_state("user-1")

    with pytest.raises(InvalidStateError, match="expired"):
        decode_state(state, max_age=-1)


def test_garbage():
    with pytest.raises(InvalidStateError):
        decode_state("not-a-state")
