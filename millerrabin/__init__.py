from .kernel import decompose, is_witness, miller_rabin, to_int
from .bases import DETERMINISTIC_BASES, WORD_LIMIT, base_sequence
from .driver import find_witness, is_prime
from .config import Settings, load_settings
__all__ = [
    "is_prime", "is_witness",
    "decompose", "miller_rabin", "find_witness", "to_int",
    "DETERMINISTIC_BASES", "WORD_LIMIT", "base_sequence",
    "Settings", "load_settings",
]
