"""
Lookup structures used by the password analyser.

Provides:
- MembershipSet: exact-match lookup of known weak passwords
- SubstringDictionary: prefix tree that finds dictionary words embedded
  anywhere inside a password

Both are filled once and only read afterwards, so a single instance can be
shared between callers."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)

# Characters at or above this code point are not stored in the dictionary.
ASCII_LIMIT = 128


class MembershipSet:
	"""Set of known passwords. Empty strings are never stored."""

	def __init__(self, passwords: Optional[Iterable[str]] = None) -> None:
		self._items = set()
		for pwd in passwords or ():
			self.add(pwd)

	def add(self, password: str) -> None:
		if not password:
			return
		self._items.add(password)

	def contains(self, password: str) -> bool:
		if not password:
			return False
		return password in self._items

	def __contains__(self, password: object) -> bool:
		return isinstance(password, str) and self.contains(password)

	def __len__(self) -> int:
		return len(self._items)

	def __iter__(self) -> Iterator[str]:
		return iter(self._items)


class TrieNode:
	"""One character position in the dictionary tree."""

	__slots__ = ("children", "is_end_of_word")

	def __init__(self) -> None:
		self.children: Dict[str, TrieNode] = {}
		self.is_end_of_word = False


class SubstringDictionary:
	"""Prefix tree of dictionary words.

	Only single-byte ASCII characters form edges: while inserting, characters
	outside ASCII are skipped (so "cafés" is stored as "cafs"); while
	scanning a password they end the current match."""

	MIN_MATCH_LENGTH = 3

	def __init__(self, words: Optional[Iterable[str]] = None) -> None:
		self.root = TrieNode()
		self._size = 0
		for word in words or ():
			self.insert(word)

	def insert(self, word: str) -> None:
		if not word:
			return
		node = self.root
		for ch in word:
			if ord(ch) >= ASCII_LIMIT:
				continue
			child = node.children.get(ch)
			if child is None:
				child = TrieNode()
				node.children[ch] = child
			node = child
		if node is self.root:
			logger.debug("Ignoring dictionary word with no ASCII characters")
			return
		if not node.is_end_of_word:
			node.is_end_of_word = True
			self._size += 1

	def find_words_in_password(self, password: str) -> List[str]:
		"""Return every dictionary word found inside ``password``.

		Each start offset is scanned in turn and the match is extended one
		character at a time, so results are ordered by start offset, then by
		length. A word found at several offsets is reported each time; words
		shorter than MIN_MATCH_LENGTH are ignored."""
		found: List[str] = []
		if not password:
			return found

		n = len(password)
		for start in range(n):
			node = self.root
			for end in range(start, n):
				ch = password[end]
				if ord(ch) >= ASCII_LIMIT:
					break
				node = node.children.get(ch)
				if node is None:
					break
				length = end - start + 1
				if node.is_end_of_word and length >= self.MIN_MATCH_LENGTH:
					found.append(password[start:end + 1])
		return found

	def __len__(self) -> int:
		return self._size
