"""
The initial environment: two constants and the table of built-ins.

A built-in is a Primitive: how many operands it takes off the stack,
a pure function of those operands (given in a..b order, i.e. deepest first),
and what becomes of the result. Adding a built-in means adding a row.

Python's own float arithmetic raises where IEEE-754 would produce inf or NaN
(1/0, math.sqrt(-1), overflowing exp). The rows that can hit those cases
go through numpy's float64 instead.
"""
import math
import operator
from typing import Any, Callable, NamedTuple

import numpy as np

from .ontology import render

PUSH = "push"
PRINT = "print"

class Primitive(NamedTuple):
	arity: int
	fn: Callable[..., Any]
	outcome: str = PUSH

def _ieee(ufunc):
	def fn(*args):
		with np.errstate(all="ignore"):
			return float(ufunc(*map(np.float64, args)))
	return fn

def _relation(op):
	return lambda a, b: 1.0 if op(a, b) else 0.0

def _choose(if_false, if_true, cond):
	return if_true if cond != 0.0 else if_false

BUILTINS = {
	"+"    : Primitive(2, operator.add),
	"-"    : Primitive(2, operator.sub),
	"*"    : Primitive(2, operator.mul),
	"/"    : Primitive(2, _ieee(np.divide)),
	"^"    : Primitive(2, _ieee(np.power)),
	"sqrt" : Primitive(1, _ieee(np.sqrt)),
	"exp"  : Primitive(1, _ieee(np.exp)),
	"="    : Primitive(2, _relation(operator.eq)),
	"<"    : Primitive(2, _relation(operator.lt)),
	">"    : Primitive(2, _relation(operator.gt)),
	"<="   : Primitive(2, _relation(operator.le)),
	">="   : Primitive(2, _relation(operator.ge)),
	"?"    : Primitive(3, _choose),
	"."    : Primitive(1, render, PRINT),
}

CONSTANTS = {
	"E" : math.e,
	"PI" : math.pi,
}

def initial_variables() -> dict[str, float]:
	""" A fresh variable table. The constants in it are not protected. """
	return dict(CONSTANTS)

def initial_functions() -> dict[str, Primitive]:
	return dict(BUILTINS)
