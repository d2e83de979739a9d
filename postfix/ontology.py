"""
The four kinds of token a postfix program is made of.

Tokens remember the character offset where they began (their "spot")
so that diagnostics can point at them, but the spot takes no part
in equality: Number(5) is Number(5) wherever it was found.
"""
import math

def render(x:float) -> str:
	""" Default number-to-text conversion, as the "." built-in prints it. """
	if math.isnan(x): return "NaN"
	if math.isinf(x): return "inf" if x > 0 else "-inf"
	if x == int(x):
		if x == 0 and math.copysign(1.0, x) < 0: return "-0"
		return "%d" % x
	return repr(x)

class Token:
	spot: int
	def __init__(self, spot:int=0):
		self.spot = spot
	def key(self): return ()
	def __eq__(self, other):
		return type(self) is type(other) and self.key() == other.key()
	def __hash__(self): return hash((type(self), self.key()))
	def __repr__(self): return "<%s>" % self

class Number(Token):
	def __init__(self, value:float, spot:int=0):
		super().__init__(spot)
		self.value = float(value)
	def key(self): return (self.value,)
	def __str__(self): return "Number: " + render(self.value)

class Identifier(Token):
	def __init__(self, name:str, spot:int=0):
		assert isinstance(name, str)
		super().__init__(spot)
		self.name = name
	def key(self): return (self.name,)
	def __str__(self): return "Identifier: " + self.name

class ValueOf(Token):
	""" The "$" marker: read a variable or side-channel argument. """
	def __str__(self): return "$"

class Assign(Token):
	""" The ":" marker: bind the top of stack to the following name. """
	def __str__(self): return ":"
