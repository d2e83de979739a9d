"""
Turn program text into tokens.

The heavy lifting belongs to the booze-tools "miniscan" engine, which
compiles an ordered list of patterns into a scanner. What this module
adds is the postfix ruleset and the bookkeeping to make tokens out of
whatever the engine matched.

Every rule, even a discard rule, reports its match back here. That way
the running total of match lengths is always the current offset, and
tokens (or a LexError) can say exactly where in the text they came from.

The engine's whitespace class is ASCII-only. Any other whitespace character
is turned into a plain space before scanning, which leaves offsets unchanged.
"""
from functools import lru_cache
from typing import Callable, Iterator, NamedTuple, Optional, Sequence

from boozetools.scanning import miniscan
from boozetools.scanning.interface import ScannerBlocked

from .ontology import Token, Number, Identifier, ValueOf, Assign
from .diagnostics import LexError

class Rule(NamedTuple):
	pattern: str
	action: Optional[Callable[[str, int], Token]]   # None means discard the match.

def _negative(text:str, spot:int) -> Number:
	# Parse the digits after the sign, then negate. So "-0" is negative zero.
	return Number(-float(text[1:]), spot)

_WHITESPACE = {c: " " for c in range(0x3001) if chr(c).isspace()}

RULES = (
	Rule(r"-[0-9]*\.?[0-9]+", _negative),
	Rule(r"[0-9]*\.?[0-9]+", lambda text, spot: Number(float(text), spot)),
	Rule(r"[^0-9\$:\s]+", Identifier),
	Rule(r"\$", lambda text, spot: ValueOf(spot)),
	Rule(r":", lambda text, spot: Assign(spot)),
	Rule(r"\s+", None),
)

@lru_cache(8)
def _definition(rules:tuple[Rule, ...]) -> miniscan.Definition:
	""" Build (once per ruleset) a scanner that tags each match with its rule number. """
	definition = miniscan.Definition()
	for index, rule in enumerate(rules):
		definition.on(rule.pattern)(_tagger(index))
	return definition

def _tagger(index:int):
	def action(yy):
		yy.token("match", (index, yy.match()))
	return action

def lex(rules:Sequence[Rule], text:str) -> Iterator[Token]:
	"""
	Lazily produce the tokens of the text, in order.
	Raises LexError at the first offset where no rule matches.
	"""
	rules = tuple(rules)
	spot = 0
	try:
		for item in _definition(rules).scan(text.translate(_WHITESPACE)):
			index, matched = item[1]
			action = rules[index].action
			if action is not None:
				yield action(matched, spot)
			spot += len(matched)
	except ScannerBlocked as ex:
		raise LexError("no token matches the text at offset %d" % ex.position, ex.position) from None

def tokenize(text:str, rules:Sequence[Rule]=RULES) -> list[Token]:
	""" The whole program's tokens, or a LexError before anything gets evaluated. """
	return list(lex(rules, text))
