"""
The stack machine.

A Machine holds all the state of one run: the stack, the variables,
the built-ins, the side-channel arguments, and where printing goes.
It walks a list of tokens with a cursor, one step per token, except that
"$" and ":" each swallow the token right after them as well.

Nothing here recovers from an error. The first PostfixError ends the run;
whatever "." printed before then has already gone out.
"""
import math
import re
import sys
from typing import Sequence

from .ontology import Token, Number, Identifier, ValueOf, Assign, render
from .preamble import Primitive, PRINT, initial_variables, initial_functions
from .diagnostics import (
	PostfixSyntaxError, UnboundVariableError, UnknownFunctionError,
	StackUnderflowError, ArgumentParseError,
)
from . import front_end

# Python's float() also takes underscores and non-ASCII digits. Arguments may not.
FLOAT_TEXT = re.compile(r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)", re.IGNORECASE)

class Machine:
	stack: list[float]
	variables: dict[str, float]
	functions: dict[str, Primitive]
	arguments: Sequence[str]

	def __init__(self, arguments:Sequence[str]=(), variables=None, functions=None, out=None):
		self.stack = []
		self.variables = initial_variables() if variables is None else variables
		self.functions = initial_functions() if functions is None else functions
		self.arguments = arguments
		self._out = out

	@property
	def out(self):
		return sys.stdout if self._out is None else self._out

	def run(self, tokens:Sequence[Token]):
		cursor = 0
		while cursor < len(tokens):
			cursor = self.step(tokens, cursor)
		return self

	def step(self, tokens:Sequence[Token], cursor:int) -> int:
		""" Carry out the token at the cursor; answer where the next step begins. """
		token = tokens[cursor]
		return STEP[type(token)](self, token, tokens, cursor+1)

	def pop(self, token:Token) -> float:
		try: return self.stack.pop()
		except IndexError:
			raise StackUnderflowError("stack underflow at %s" % token, token.spot) from None

	def argument(self, index:float, token:Token) -> float:
		""" $n means side-channel position n+1. Position zero is never used. """
		position = int(index) + 1 if math.isfinite(index) else -1
		if position < 1 or position >= len(self.arguments):
			raise ArgumentParseError("no argument at index %s" % render(index), token.spot)
		text = self.arguments[position]
		if not FLOAT_TEXT.fullmatch(text):
			raise ArgumentParseError("argument %r is not a number" % text, token.spot)
		return float(text)

	def apply(self, primitive:Primitive, token:Token):
		operands = [self.pop(token) for _ in range(primitive.arity)]
		operands.reverse()
		result = primitive.fn(*operands)
		if primitive.outcome == PRINT:
			print(result, file=self.out)
		else:
			self.stack.append(result)

def _follow_on(tokens:Sequence[Token], cursor:int, token:Token, expectation:str) -> Token:
	if cursor < len(tokens): return tokens[cursor]
	raise PostfixSyntaxError("syntax error: %s not followed by %s" % (token, expectation), token.spot)

def _step_value_of(machine:Machine, token:ValueOf, tokens, cursor:int) -> int:
	expectation = "number or identifier"
	subject = _follow_on(tokens, cursor, token, expectation)
	if isinstance(subject, Number):
		machine.stack.append(machine.argument(subject.value, subject))
	elif isinstance(subject, Identifier):
		try: value = machine.variables[subject.name]
		except KeyError:
			raise UnboundVariableError("unbound variable %s" % subject.name, subject.spot) from None
		machine.stack.append(value)
	else:
		raise PostfixSyntaxError("syntax error: %s not followed by %s" % (token, expectation), subject.spot)
	return cursor + 1

def _step_assign(machine:Machine, token:Assign, tokens, cursor:int) -> int:
	subject = _follow_on(tokens, cursor, token, "identifier")
	if not isinstance(subject, Identifier):
		raise PostfixSyntaxError("syntax error: %s not followed by identifier" % token, subject.spot)
	machine.variables[subject.name] = machine.pop(token)
	return cursor + 1

def _step_number(machine:Machine, token:Number, tokens, cursor:int) -> int:
	machine.stack.append(token.value)
	return cursor

def _step_identifier(machine:Machine, token:Identifier, tokens, cursor:int) -> int:
	try: primitive = machine.functions[token.name]
	except KeyError:
		raise UnknownFunctionError("unknown function %s" % token.name, token.spot) from None
	machine.apply(primitive, token)
	return cursor

STEP = {
	ValueOf: _step_value_of,
	Assign: _step_assign,
	Number: _step_number,
	Identifier: _step_identifier,
}

def interpret(text:str, arguments:Sequence[str]=(), out=None) -> Machine:
	""" Tokenize all of the text, then run it. Answers the finished machine. """
	tokens = front_end.tokenize(text)
	return Machine(arguments, out=out).run(tokens)
