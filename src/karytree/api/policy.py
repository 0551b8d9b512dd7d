from __future__ import annotations

from dataclasses import dataclass

from cryptography.hazmat.primitives import hashes


_HASH_ALGORITHMS = {
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}


@dataclass
class TreePolicy:
    """Rendering and hashing settings shared by a tree and its helpers."""

    absent_token: str = "None"
    separator: str = " "

    hash_algorithm: str = "sha256"

    def __post_init__(self) -> None:
        self.hash_algorithm = (self.hash_algorithm or "sha256").strip().lower()
        if self.hash_algorithm not in _HASH_ALGORITHMS:
            raise ValueError(f"unsupported hash algorithm: {self.hash_algorithm}")

    def hash_algo(self) -> hashes.HashAlgorithm:
        return _HASH_ALGORITHMS[self.hash_algorithm]()

    def as_runtime_dict(self) -> dict[str, str]:
        return {
            "absent_token": self.absent_token,
            "separator": self.separator,
            "hash_algorithm": self.hash_algorithm,
        }
