import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from postfix import cmdline

def _drive(argv, stdin=""):
	""" Run the driver with fake standard streams; answer (status, stdout, stderr). """
	out, err = io.StringIO(), io.StringIO()
	with mock.patch("sys.stdin", io.StringIO(stdin)), mock.patch("sys.stdout", out), mock.patch("sys.stderr", err):
		status = cmdline.run(cmdline.parser.parse_args(argv))
	return status, out.getvalue(), err.getvalue()

class CommandLineTests(unittest.TestCase):

	def test_normal_run(self):
		self.assertEqual((0, "3\n", ""), _drive(["1 2 + ."]))

	def test_side_channel(self):
		status, printed, _ = _drive(["$0 ."], stdin="10 20 30")
		self.assertEqual(0, status)
		self.assertEqual("20\n", printed)

	def test_side_channel_is_whitespace_split(self):
		status, printed, _ = _drive(["$0 $1 + ."], stdin="skip\n 3\t4\n")
		self.assertEqual(0, status)
		self.assertEqual("7\n", printed)

	def test_arguments_file(self):
		with tempfile.TemporaryDirectory() as folder:
			path = Path(folder) / "args.txt"
			path.write_text("zero 6 7", encoding="utf-8")
			status, printed, _ = _drive(["-a", str(path), "$0 $1 * ."], stdin="ignored 1 1")
		self.assertEqual(0, status)
		self.assertEqual("42\n", printed)

	def test_stack_underflow_exits_nonzero(self):
		status, printed, complaint = _drive(["+"])
		self.assertEqual(1, status)
		self.assertEqual("", printed)
		self.assertIn("stack underflow", complaint)

	def test_unknown_function(self):
		status, _, complaint = _drive(["1 foo"])
		self.assertEqual(1, status)
		self.assertIn("unknown function foo", complaint)

	def test_output_before_failure_is_kept(self):
		status, printed, complaint = _drive(["5 . $ y"])
		self.assertEqual(1, status)
		self.assertEqual("5\n", printed)
		self.assertIn("unbound variable y", complaint)

	def test_tokens_only(self):
		status, printed, _ = _drive(["-t", "2 : r $r -1.5 sqrt"])
		self.assertEqual(0, status)
		self.assertEqual([
			"Number: 2",
			":",
			"Identifier: r",
			"$",
			"Identifier: r",
			"Number: -1.5",
			"Identifier: sqrt",
		], printed.splitlines())

	def test_tokens_only_does_not_run(self):
		self.assertEqual(0, _drive(["-t", "+"])[0])

	def test_show_stack(self):
		status, printed, complaint = _drive(["-s", "1 2 3 ."])
		self.assertEqual(0, status)
		self.assertEqual("3\n", printed)
		self.assertIn("Stack: 1 2", complaint)

	def test_verbose(self):
		status, _, complaint = _drive(["-v", "1 2"], stdin="a b c")
		self.assertEqual(0, status)
		self.assertIn("Read 2 token(s).", complaint)
		self.assertIn("Got 3 side-channel argument(s).", complaint)

	def test_usage_without_arguments(self):
		out = io.StringIO()
		with mock.patch("sys.argv", ["postfix"]), mock.patch("sys.stdout", out):
			cmdline.main()
		self.assertIn("usage: postfix", out.getvalue())

	def test_main_exits_with_status(self):
		with mock.patch("sys.argv", ["postfix", "foo"]), mock.patch("sys.stdin", io.StringIO("")), mock.patch("sys.stderr", io.StringIO()):
			with self.assertRaises(SystemExit) as context:
				cmdline.main()
		self.assertEqual(1, context.exception.code)


if __name__ == '__main__':
	unittest.main()
