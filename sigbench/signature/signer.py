"""Signing capability bound to a freshly generated key.

Usage:
    from sigbench.signature import SignatureAlgorithm, generate_signer

    signer = generate_signer(SignatureAlgorithm.ECDSA_P256)
    signature = signer.sign(b"payload")
"""

from typing import Protocol

from sigbench.errors import SigningError
from sigbench.signature.algorithms import (
    PrivateKey,
    PublicKey,
    SignatureAlgorithm,
    SignFunction,
)


class Signer(Protocol):
    """Anything that can sign a message."""

    def sign(self, data: bytes) -> bytes:
        """Sign data and return the signature bytes."""
        ...


class PrivateKeySigner:
    """Signs messages with a private key generated from a key template."""

    def __init__(
        self,
        algorithm: SignatureAlgorithm,
        private_key: PrivateKey,
        sign_function: SignFunction,
    ) -> None:
        self.algorithm = algorithm
        self.private_key = private_key
        self._sign = sign_function

    def sign(self, data: bytes) -> bytes:
        """Sign data.

        Raises:
            SigningError: If the underlying primitive fails.
        """
        try:
            return self._sign(data)
        except Exception as e:
            raise SigningError(self.algorithm.value, str(e)) from e

    def public_key(self) -> PublicKey:
        """Return the public half of the signing key."""
        return self.private_key.public_key()


def generate_signer(algorithm: SignatureAlgorithm) -> PrivateKeySigner:
    """Generate a fresh key for algorithm and bind a signer to it.

    Args:
        algorithm: The algorithm whose key template to use.

    Returns:
        A signer holding the new private key.

    Raises:
        SigningError: If key generation fails.
    """
    template = algorithm.key_template
    try:
        private_key = template.generate_private_key()
    except Exception as e:
        raise SigningError(algorithm.value, f"key generation failed: {e}") from e

    return PrivateKeySigner(
        algorithm, private_key, template.signing_function(private_key)  # type: ignore[arg-type]
    )
