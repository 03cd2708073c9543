"""Signature algorithms and signing capabilities backed by ``cryptography``."""

from sigbench.signature.algorithms import (
    KEY_TEMPLATES,
    EcdsaKeyTemplate,
    Ed25519KeyTemplate,
    KeyTemplate,
    SignatureAlgorithm,
)
from sigbench.signature.signer import PrivateKeySigner, Signer, generate_signer

__all__ = [
    "KEY_TEMPLATES",
    "EcdsaKeyTemplate",
    "Ed25519KeyTemplate",
    "KeyTemplate",
    "PrivateKeySigner",
    "SignatureAlgorithm",
    "Signer",
    "generate_signer",
]
