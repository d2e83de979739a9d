"""
Everything that can go wrong while interpreting a postfix program,
and how the command-line driver tells the user about it.

Every error is fatal. Nothing below tries to recover; the point is
to say clearly what happened and where, then get out of the way.
"""
import sys
from typing import Optional
from boozetools.support.failureprone import SourceText, illustration

class PostfixError(Exception):
	""" Base of the taxonomy. Carries a message and (when known) a source offset. """
	caption = "Here"
	def __init__(self, message:str, spot:Optional[int]=None):
		super().__init__(message)
		self.message = message
		self.spot = spot
	def __str__(self): return self.message

class LexError(PostfixError):
	caption = "No token starts here"

class PostfixSyntaxError(PostfixError):
	caption = "This needs a proper follow-on"

class UnboundVariableError(PostfixError):
	caption = "Nothing is bound to this name"

class UnknownFunctionError(PostfixError):
	caption = "No such built-in"

class StackUnderflowError(PostfixError):
	caption = "The stack ran dry here"

class ArgumentParseError(PostfixError):
	caption = "This argument is unusable"


class Report:
	""" Talks to the console on behalf of the command-line driver. """

	def __init__(self, *, verbose:int=0, stream=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._stream = stream

	@property
	def stream(self):
		return sys.stderr if self._stream is None else self._stream

	def info(self, *args):
		if self._verbose:
			print(*args, file=self.stream)

	def complain(self, error:PostfixError, text:str):
		""" Emit one error, with a picture of the offending spot if there is one. """
		print(error.message, file=self.stream)
		if error.spot is not None and text:
			print(_picture(text, error.spot, error.caption), file=self.stream)
		self.stream.flush()

def _picture(text:str, spot:int, caption:str) -> str:
	source = SourceText(text)
	row, col = source.find_row_col(min(spot, len(text)-1))
	single_line = source.line_of_text(row)
	width = max(1, _width_at(text, spot))
	return illustration(single_line, col, width, prefix='% 6d |' % row, caption=caption)

def _width_at(text:str, spot:int) -> int:
	""" How far the offending word extends, so the underline covers all of it. """
	end = spot
	while end < len(text) and not text[end].isspace(): end += 1
	return end - spot
