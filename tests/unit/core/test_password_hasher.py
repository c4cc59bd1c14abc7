import pytest

from user_service.app.core.services import BcryptPasswordHasher


class TestBcryptPasswordHasher:
    def test_digest_differs_from_plaintext(self, password_hasher: BcryptPasswordHasher):
        digest = password_hasher.hash("pw")

        assert digest != "pw"
        assert digest.startswith("$2b$04$")

    def test_verify(self, password_hasher: BcryptPasswordHasher):
        digest = password_hasher.hash("pw")

        assert password_hasher.verify("pw", digest)
        assert not password_hasher.verify("other", digest)

    def test_salted(self, password_hasher: BcryptPasswordHasher):
        assert password_hasher.hash("pw") != password_hasher.hash("pw")

    def test_unicode_password(self, password_hasher: BcryptPasswordHasher):
        digest = password_hasher.hash("senha-çã")

        assert password_hasher.verify("senha-çã", digest)

    def test_verify_rejects_non_bcrypt_digest(self, password_hasher: BcryptPasswordHasher):
        assert not password_hasher.verify("pw", "pw")

    def test_72_bytes_accepted(self, password_hasher: BcryptPasswordHasher):
        password = "a" * 72

        assert password_hasher.verify(password, password_hasher.hash(password))

    def test_longer_than_72_bytes_rejected(self, password_hasher: BcryptPasswordHasher):
        with pytest.raises(ValueError, match="72 bytes"):
            password_hasher.hash("a" * 73)

    def test_limit_counts_utf8_bytes(self, password_hasher: BcryptPasswordHasher):
        # 37 two-byte characters are 74 bytes
        with pytest.raises(ValueError):
            password_hasher.hash("ç" * 37)

    def test_long_password_does_not_match_truncated_digest(
        self, password_hasher: BcryptPasswordHasher
    ):
        digest = password_hasher.hash("a" * 72)

        assert not password_hasher.verify("a" * 100, digest)
