"""RSA Key Manager.

ACCESS 토큰 서명용 RSA 키 쌍을 로드합니다.
키가 설정되지 않으면 임시 키를 생성합니다 (재시작 시 기존 토큰 무효).
"""

from __future__ import annotations

import logging
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

logger = logging.getLogger(__name__)

RSA_PUBLIC_EXPONENT = 65537
RSA_KEY_SIZE = 2048


class KeyManager:
    """RS256 키 쌍 보관소.

    개인키 PEM이 있으면 그것을, 없으면 경로의 파일을, 둘 다 없으면 임시 키를 사용합니다.
    공개키가 따로 주어지지 않으면 개인키에서 유도합니다.
    """

    def __init__(self, private_key_pem: str, public_key_pem: str) -> None:
        self._private_key_pem = private_key_pem
        self._public_key_pem = public_key_pem

    @classmethod
    def load(
        cls,
        *,
        private_key_pem: str | None = None,
        public_key_pem: str | None = None,
        private_key_path: str | None = None,
        public_key_path: str | None = None,
    ) -> "KeyManager":
        if not private_key_pem and private_key_path:
            private_key_pem = Path(private_key_path).read_text(encoding="utf-8")
        if not public_key_pem and public_key_path:
            public_key_pem = Path(public_key_path).read_text(encoding="utf-8")

        if not private_key_pem:
            logger.warning("No RSA key configured, generating ephemeral key pair")
            return cls.generate()

        private_key = serialization.load_pem_private_key(
            private_key_pem.encode("utf-8"), password=None
        )
        if not public_key_pem:
            public_key_pem = _public_pem(private_key.public_key())
        return cls(private_key_pem=private_key_pem, public_key_pem=public_key_pem)

    @classmethod
    def generate(cls) -> "KeyManager":
        """임시 RSA 키 쌍 생성."""
        private_key = rsa.generate_private_key(
            public_exponent=RSA_PUBLIC_EXPONENT, key_size=RSA_KEY_SIZE
        )
        private_pem = private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        ).decode("utf-8")
        return cls(private_key_pem=private_pem, public_key_pem=_public_pem(private_key.public_key()))

    @property
    def private_key_pem(self) -> str:
        return self._private_key_pem

    @property
    def public_key_pem(self) -> str:
        return self._public_key_pem


def _public_pem(public_key: rsa.RSAPublicKey) -> str:
    return public_key.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("utf-8")
