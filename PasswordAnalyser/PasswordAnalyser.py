"""
Password strength analyser with rule-based scoring.

Provides:
- analyse(password) -> StrengthResult with score, strength label, feedback
- generate(length) -> random strong password (see PasswordGenerator)
- CLI to analyse or generate passwords once or interactively

Scoring rules, in the order their feedback is reported:
- length: 16+ chars +4, 12+ +3, 8+ +2, shorter 0
- mixed upper and lower case +1, digits +1, special characters +2
- exact match with a well-known password resets the score to 0
- an embedded dictionary word (3+ letters) costs 2 points, never below 0
- more than 20 characters +2

Character classes are ASCII only: anything that is not A-Z, a-z or 0-9,
including every non-ASCII character, counts as a special character. Length is measured in characters
(code points), not in encoded bytes."""
from __future__ import annotations

import argparse
import functools
import json
import logging
import random
import re
from dataclasses import asdict, dataclass, field
from typing import Dict, Iterable, List, Optional

from PasswordGenerator import DEFAULT_LENGTH, PasswordGenerator, generate
from PasswordStructures import MembershipSet, SubstringDictionary

logger = logging.getLogger(__name__)

COMMON_PASSWORDS = (
	"password", "123456", "password123", "admin", "qwerty",
	"letmein", "welcome", "monkey", "sunshine", "password1",
	"12345678", "123456789", "12345", "1234567", "1234567890",
	"abc123", "football", "master", "hello", "freedom",
)

DICTIONARY_WORDS = (
	"password", "admin", "user", "login", "secret",
	"hello", "welcome", "qwerty", "keyboard", "computer",
	"system", "account", "access", "security", "network",
)

# Lowest first.
STRENGTH_LABELS = ("Very Weak", "Weak", "Moderate", "Strong", "Very Strong")
MAX_SCORE = 10

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(r"[^A-Za-z0-9]")
_LETTER = re.compile(r"[A-Za-z]")


@dataclass
class StrengthResult:
	"""Outcome of one analysis."""
	score: int = 0
	strength: str = STRENGTH_LABELS[0]
	feedback: List[str] = field(default_factory=list)

	def to_dict(self) -> Dict[str, object]:
		return asdict(self)


def strength_label(score: int) -> str:
	if score >= 9:
		return "Very Strong"
	elif score >= 7:
		return "Strong"
	elif score >= 5:
		return "Moderate"
	elif score >= 3:
		return "Weak"
	return "Very Weak"


class StrengthAnalyser:
	"""Scores passwords against a weak-password list and a word dictionary."""

	def __init__(self, common_passwords: Optional[Iterable[str]] = None,
			dictionary_words: Optional[Iterable[str]] = None) -> None:
		self.common_passwords = MembershipSet(
			COMMON_PASSWORDS if common_passwords is None else common_passwords)
		self.dictionary = SubstringDictionary(
			DICTIONARY_WORDS if dictionary_words is None else dictionary_words)
		logger.debug("Analyser ready: %d common passwords, %d dictionary words",
			len(self.common_passwords), len(self.dictionary))

	def analyse(self, password: str) -> StrengthResult:
		if not isinstance(password, str):
			raise TypeError(f"password must be a str, not {type(password).__name__}")

		result = StrengthResult()
		if not password:
			result.feedback.append("✗ Password cannot be empty")
			return result

		length = len(password)
		if length >= 16:
			result.score += 4
			result.feedback.append("✓ Excellent password length (16+ characters)")
		elif length >= 12:
			result.score += 3
			result.feedback.append("✓ Good password length (12+ characters)")
		elif length >= 8:
			result.score += 2
			result.feedback.append("✓ Acceptable password length (8+ characters)")
		else:
			result.feedback.append("✗ Password too short (minimum 8 characters recommended)")

		if _UPPER.search(password) and _LOWER.search(password):
			result.score += 1
			result.feedback.append("✓ Contains both uppercase and lowercase letters")
		else:
			result.feedback.append("✗ Include both uppercase and lowercase letters")

		if _DIGIT.search(password):
			result.score += 1
			result.feedback.append("✓ Contains numbers")
		else:
			result.feedback.append("✗ Include numbers")

		if _SPECIAL.search(password):
			result.score += 2
			result.feedback.append("✓ Contains special characters")
		else:
			result.feedback.append("✗ Include special characters")

		if self.common_passwords.contains(password):
			result.score = 0
			result.feedback.append("✗ This is a very common password")

		if _LETTER.search(password):
			words = self.dictionary.find_words_in_password(password)
			logger.debug("%d dictionary match(es) found", len(words))
			if words:
				result.score = max(0, result.score - 2)
				result.feedback.append("✗ Avoid using dictionary words")

		if length > 20:
			result.score += 2
			result.feedback.append("✓ Bonus for very long password")

		result.strength = strength_label(result.score)
		return result


@functools.lru_cache(maxsize=None)
def default_analyser() -> StrengthAnalyser:
	"""Shared analyser built from the built-in lists."""
	return StrengthAnalyser()


def analyse(password: str) -> StrengthResult:
	return default_analyser().analyse(password)


def _print_report(result: StrengthResult, as_json: bool = False) -> None:
	if as_json:
		print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
		return
	print(f"\nStrength: {result.strength} (Score: {result.score}/{MAX_SCORE})")
	print("Analysis:")
	for line in result.feedback:
		print(f"  {line}")


def _print_generated(password: str, result: StrengthResult, as_json: bool = False) -> None:
	if as_json:
		data = {"password": password}
		data.update(result.to_dict())
		print(json.dumps(data, indent=2, ensure_ascii=False))
		return
	print(f"Generated password: {password}")
	print(f"Strength: {result.strength} (Score: {result.score}/{MAX_SCORE})")


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		description="Analyse password strength or generate strong passwords.")
	parser.add_argument("password", nargs="?",
		help="Password to analyse once. If omitted (and no --generate), start interactive mode. Put '--' before a password that starts with '-'.")
	parser.add_argument("-g", "--generate", action="store_true",
		help="Generate one strong password, analyse it and exit.")
	parser.add_argument("-l", "--length", type=int, default=DEFAULT_LENGTH,
		help=f"Length of generated passwords (default: {DEFAULT_LENGTH}, minimum 4).")
	parser.add_argument("--seed", type=int,
		help="Seed the generator for reproducible output (not for real passwords).")
	parser.add_argument("-s", "--show", action="store_true",
		help="Show typed passwords in interactive mode instead of hiding them.")
	parser.add_argument("--json", action="store_true", help="Print results as JSON.")
	parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
	return parser


def _read_password(show: bool) -> str:
	if show:
		return input("Enter password to analyse: ")
	import getpass
	return getpass.getpass("Enter password to analyse (hidden): ")


def main(argv: List[str] | None = None) -> int:
	"""CLI: analyse a password given as argument, generate one with
	--generate, or otherwise enter an interactive loop with the commands
	'analyse', 'generate' and 'quit'."""
	args = build_parser().parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s")

	analyser = default_analyser()
	generator = PasswordGenerator(random.Random(args.seed) if args.seed is not None else None)

	if args.generate:
		pwd = generator.generate_strong_password(args.length)
		_print_generated(pwd, analyser.analyse(pwd), args.json)
		return 0

	if args.password is not None:
		_print_report(analyser.analyse(args.password), args.json)
		return 0

	print("~ Password Strength Analyser ~")
	print("Commands: 'analyse', 'generate', 'quit'")
	while True:
		try:
			command = input("\nEnter command: ").strip().lower()
			if command in ("quit", "exit"):
				break
			if command == "generate":
				pwd = generator.generate_strong_password(args.length)
				_print_generated(pwd, analyser.analyse(pwd), args.json)
			elif command == "analyse":
				_print_report(analyser.analyse(_read_password(args.show)), args.json)
			else:
				print("Unknown command. Use 'analyse', 'generate', or 'quit'")
		except (KeyboardInterrupt, EOFError):
			print()
			break

	print("Thank you for using this password strength analyser!")
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
