import io
import os
import tempfile
import unittest
from unittest.mock import patch, call

import main
import shell
from constants import FAREWELL, WELCOME
from output_sink import OutputSink
from shell_config import ShellConfig
from shell_state import ShellState


class TestReadCommand(unittest.TestCase):
    def test_read_command_strips_line(self):
        with patch("builtins.input", side_effect=["  ls -a  "]):
            self.assertEqual("ls -a", shell.read_command())

    def test_read_command_passes_prompt(self):
        with patch("builtins.input", return_value="pwd") as mock_input:
            shell.read_command("/tmp > ")
        mock_input.assert_called_once_with("/tmp > ")


class TestShellRun(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.root = os.path.realpath(self.tmpdir.name)

        self.console = io.StringIO()
        self.sh = shell.Shell(ShellState(self.root), OutputSink(self.console))

    def run_with_input(self, *lines):
        with patch("builtins.input", side_effect=list(lines)) as mock_input:
            rc = self.sh.run()
        return rc, mock_input

    def test_welcome_and_exit(self):
        rc, _ = self.run_with_input("exit")
        self.assertEqual(0, rc)
        self.assertEqual(f"{WELCOME}\n{FAREWELL}\n", self.console.getvalue())
        self.assertFalse(self.sh.state.running)

    def test_prompt_follows_current_directory(self):
        os.mkdir(os.path.join(self.root, "sub"))
        _, mock_input = self.run_with_input("cd sub", "exit")
        self.assertEqual(
            [call(f"{self.root} > "), call(f"{os.path.join(self.root, 'sub')} > ")],
            mock_input.call_args_list,
        )

    def test_errors_do_not_end_session(self):
        rc, mock_input = self.run_with_input("bogus", "cat", "rm nothing", "exit")
        self.assertEqual(0, rc)
        self.assertEqual(4, mock_input.call_count)
        lines = self.console.getvalue().splitlines()
        self.assertEqual([
            WELCOME,
            "Error: Unknown command. Type 'help' for a list of commands.",
            "Error: 'cat' requires a file name.",
            "Error: File not found.",
            FAREWELL,
        ], lines)

    def test_end_of_input_ends_session(self):
        rc, _ = self.run_with_input("pwd", EOFError())
        self.assertEqual(0, rc)
        self.assertEqual(f"{WELCOME}\n{self.root}\n\n", self.console.getvalue())

    def test_keyboard_interrupt_reprompts(self):
        rc, mock_input = self.run_with_input(KeyboardInterrupt(), "exit")
        self.assertEqual(0, rc)
        self.assertEqual(2, mock_input.call_count)

    def test_bad_redirect_target_does_not_end_session(self):
        rc, mock_input = self.run_with_input("pwd > a\x00b", "pwd", "exit")
        self.assertEqual(0, rc)
        self.assertEqual(3, mock_input.call_count)
        self.assertEqual(
            [WELCOME, "Error: Could not redirect output to file.", self.root, FAREWELL],
            self.console.getvalue().splitlines(),
        )

    def test_session_round_trip(self):
        rc, _ = self.run_with_input(
            "mkdir work",
            "cd work",
            "touch a.txt",
            "touch b.txt",
            "pwd > where.txt",
            "ls | cat",
            "exit",
        )
        self.assertEqual(0, rc)

        work = os.path.join(self.root, "work")
        self.assertEqual(work, self.sh.state.current_directory)
        with open(os.path.join(work, "where.txt"), encoding="utf-8") as f:
            self.assertEqual(work + "\n", f.read())

        lines = self.console.getvalue().splitlines()
        self.assertEqual(
            [WELCOME, "Directory created: work", "File created: a.txt",
             "File created: b.txt", "Output redirected to where.txt"],
            lines[:5],
        )
        self.assertEqual(["a.txt", "b.txt", "where.txt"], sorted(lines[5:8]))
        self.assertEqual(FAREWELL, lines[8])


class TestMain(unittest.TestCase):
    def test_main_runs_shell_and_exits_zero(self):
        with patch.object(main, "load_config", return_value=ShellConfig()), \
                patch.object(main, "configure_logging"), \
                patch.object(main, "Shell") as mock_shell:
            with self.assertRaises(SystemExit) as ctx:
                main.main()

        self.assertEqual(0, ctx.exception.code)
        mock_shell.return_value.run.assert_called_once_with()

    def test_main_reports_config_warnings(self):
        config = ShellConfig(warnings=("unknown log level 'x', using WARNING",))
        with patch.object(main, "load_config", return_value=config), \
                patch.object(main, "configure_logging") as mock_logging, \
                patch.object(main, "Shell"):
            with self.assertRaises(SystemExit):
                main.main()

        mock_logging.return_value.warning.assert_called_once_with(
            "unknown log level 'x', using WARNING")


if __name__ == "__main__":
    unittest.main()
