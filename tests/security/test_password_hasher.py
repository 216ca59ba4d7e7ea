from __future__ import annotations

import pytest

from firmness.core.security.password_hasher import PasswordHasher


class TestPasswordHasher:
    def test_hash_and_verify(self, hasher: PasswordHasher) -> None:
        hashed = hasher.hash("s3cret-pass")
        assert hashed != "s3cret-pass"
        assert hasher.verify("s3cret-pass", hashed)
        assert not hasher.verify("wrong-pass", hashed)

    def test_hashes_are_salted(self, hasher: PasswordHasher) -> None:
        assert hasher.hash("same") != hasher.hash("same")

    def test_malformed_hash_is_a_mismatch(self, hasher: PasswordHasher) -> None:
        assert not hasher.verify("whatever", "not-a-bcrypt-hash")

    def test_empty_inputs(self, hasher: PasswordHasher) -> None:
        assert not hasher.verify("", "x")
        with pytest.raises(ValueError):
            hasher.hash("")

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_rounds_out_of_range(self, rounds: int) -> None:
        with pytest.raises(ValueError):
            PasswordHasher(rounds=rounds)
