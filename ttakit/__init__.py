"""Tick-aware containers, hashing, modular arithmetic and a priority thread pool."""

__version__ = "0.1.0"

__all__ = [
    "ast",
    "atomic",
    "bignum",
    "bplus",
    "btree",
    "container",
    "hashmap",
    "heap",
    "lifecycle",
    "nice",
    "ntt",
    "pool",
    "queues",
    "scheduler",
    "siphash",
    "table",
    "tasks",
    "timing",
]