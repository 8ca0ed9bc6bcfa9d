"""
Random strong-password generator.

Every generated password holds at least one uppercase letter, one lowercase
letter, one digit and one special character; the rest is drawn from all
four pools together and the result is shuffled with Fisher-Yates.

The random source is general purpose (random.Random), not suitable for key
material. Pass a seeded random.Random for reproducible output."""
from __future__ import annotations

import logging
import random
import string
from typing import List, MutableSequence, Optional

logger = logging.getLogger(__name__)

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
SPECIAL = "!@#$%^&*()-_=+"

CHARACTER_POOLS = (UPPERCASE, LOWERCASE, DIGITS, SPECIAL)
ALL_CHARACTERS = "".join(CHARACTER_POOLS)

DEFAULT_LENGTH = 16
# One character from each pool is always placed.
MIN_LENGTH = len(CHARACTER_POOLS)


def fisher_yates_shuffle(items: MutableSequence, rng: random.Random) -> None:
	"""Shuffle ``items`` in place, every permutation equally likely."""
	for i in range(len(items) - 1, 0, -1):
		j = rng.randrange(i + 1)
		items[i], items[j] = items[j], items[i]


class PasswordGenerator:
	"""Generates passwords from an owned random source."""

	def __init__(self, rng: Optional[random.Random] = None) -> None:
		# random.Random() seeds itself from os.urandom / time
		self.rng = rng if rng is not None else random.Random()

	def _pick(self, pool: str) -> str:
		return pool[self.rng.randrange(len(pool))]

	def generate_strong_password(self, length: int = DEFAULT_LENGTH) -> str:
		"""Return a random password of ``length`` characters.

		Lengths below MIN_LENGTH still produce MIN_LENGTH characters, since
		every category is always represented."""
		if isinstance(length, bool) or not isinstance(length, int):
			raise TypeError(f"length must be an int, not {type(length).__name__}")
		if length < MIN_LENGTH:
			logger.warning("Requested length %d is below %d; generating %d characters",
				length, MIN_LENGTH, MIN_LENGTH)

		chars: List[str] = [self._pick(pool) for pool in CHARACTER_POOLS]
		while len(chars) < length:
			chars.append(self._pick(ALL_CHARACTERS))

		fisher_yates_shuffle(chars, self.rng)
		logger.debug("Generated password of length %d", len(chars))
		return "".join(chars)


def generate(length: int = DEFAULT_LENGTH, rng: Optional[random.Random] = None) -> str:
	"""Generate one strong password with a fresh (or the given) random source."""
	return PasswordGenerator(rng).generate_strong_password(length)
