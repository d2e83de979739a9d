"""
This is an interpreter for a small postfix (reverse Polish) calculator language.

{0}

For example:

    echo "x 10 20 30" | postfix "$0 $1 + ."

prints 50. Side-channel arguments come from standard input (or from a file
with -a), and $n reads the one in position n+1.

    postfix -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="postfix",
	description="Interpreter for a small postfix calculator language.",
)
parser.add_argument("program", help="the program text, e.g. '2 PI * $r * .'")
parser.add_argument('-a', "--arguments", type=Path, help="Read side-channel arguments from this file instead of standard input.")
parser.add_argument('-t', "--tokens", action="store_true", help="Just list the tokens of the program; do not run it.")
parser.add_argument('-s', "--stack", action="store_true", help="Show whatever is left on the stack after a successful run.")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what is going on.")

def _side_channel(args) -> list[str]:
	if args.arguments is None:
		return sys.stdin.read().split()
	else:
		return args.arguments.read_text(encoding="utf-8").split()

def run(args):
	from .diagnostics import Report, PostfixError
	from .front_end import tokenize
	from .evaluator import Machine
	from .ontology import render
	report = Report(verbose=args.verbose)
	try:
		tokens = tokenize(args.program)
		report.info("Read %d token(s)." % len(tokens))
		if args.tokens:
			for token in tokens: print(token)
			return 0
		arguments = _side_channel(args)
		report.info("Got %d side-channel argument(s)." % len(arguments))
		machine = Machine(arguments).run(tokens)
	except PostfixError as ex:
		report.complain(ex, args.program)
		return 1
	if args.stack:
		print("Stack:", ' '.join(map(render, machine.stack)), file=sys.stderr)
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
