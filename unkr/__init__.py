"""Encrypt, decrypt and brute-force classical ciphers."""

__version__ = "0.1.0"