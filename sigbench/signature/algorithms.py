"""Supported signature algorithms and the key templates behind them.

The set of algorithms is closed: every SignatureAlgorithm member maps to
exactly one key template, and a template is either an Ed25519 template or an
ECDSA template carrying its curve and digest. The ECDSA digests follow the
common key-template convention of pairing P-384 and P-521 with SHA-512.
"""

import sys
from collections.abc import Callable
from dataclasses import dataclass

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from sigbench.errors import ConfigurationError

if sys.version_info >= (3, 11):  # noqa: UP036
    from enum import StrEnum
else:
    from backports.strenum import StrEnum  # noqa: UP035

PrivateKey = ed25519.Ed25519PrivateKey | ec.EllipticCurvePrivateKey
PublicKey = ed25519.Ed25519PublicKey | ec.EllipticCurvePublicKey
SignFunction = Callable[[bytes], bytes]


@dataclass(frozen=True)
class Ed25519KeyTemplate:
    """Key template for Ed25519 (pure EdDSA, no separate digest)."""

    @property
    def description(self) -> str:
        return "Ed25519"

    def generate_private_key(self) -> ed25519.Ed25519PrivateKey:
        return ed25519.Ed25519PrivateKey.generate()

    def signing_function(self, private_key: ed25519.Ed25519PrivateKey) -> SignFunction:
        return private_key.sign


@dataclass(frozen=True)
class EcdsaKeyTemplate:
    """Key template for ECDSA over a NIST curve with DER-encoded signatures."""

    curve: type[ec.EllipticCurve]
    hash_algorithm: type[hashes.HashAlgorithm]

    @property
    def description(self) -> str:
        return f"ECDSA {self.curve.name} with {self.hash_algorithm.name.upper()}"

    def generate_private_key(self) -> ec.EllipticCurvePrivateKey:
        return ec.generate_private_key(self.curve())

    def signing_function(self, private_key: ec.EllipticCurvePrivateKey) -> SignFunction:
        # Shared by every call; nothing is allocated inside the timed region
        signature_algorithm = ec.ECDSA(self.hash_algorithm())

        def sign(data: bytes) -> bytes:
            return private_key.sign(data, signature_algorithm)

        return sign


KeyTemplate = Ed25519KeyTemplate | EcdsaKeyTemplate


class SignatureAlgorithm(StrEnum):
    """Signature algorithms the harness can benchmark."""

    ED25519 = "ED25519"
    ECDSA_P256 = "ECDSA_P256"
    ECDSA_P384 = "ECDSA_P384"
    ECDSA_P521 = "ECDSA_P521"

    @property
    def key_template(self) -> KeyTemplate:
        """Return the key template used to generate keys for this algorithm."""
        return KEY_TEMPLATES[self]

    @classmethod
    def parse(cls, name: str) -> "SignatureAlgorithm":
        """Look up an algorithm by name, ignoring case.

        Raises:
            ConfigurationError: If name is not a supported algorithm.
        """
        try:
            return cls(name.strip().upper())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ConfigurationError(
                f"Unknown signature algorithm: {name}. Supported: {valid}"
            ) from None


KEY_TEMPLATES: dict[SignatureAlgorithm, KeyTemplate] = {
    SignatureAlgorithm.ED25519: Ed25519KeyTemplate(),
    SignatureAlgorithm.ECDSA_P256: EcdsaKeyTemplate(ec.SECP256R1, hashes.SHA256),
    SignatureAlgorithm.ECDSA_P384: EcdsaKeyTemplate(ec.SECP384R1, hashes.SHA512),
    SignatureAlgorithm.ECDSA_P521: EcdsaKeyTemplate(ec.SECP521R1, hashes.SHA512),
}
