import io
import json
import os
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import mock

from vigenere_tools import decode_bytes_best_effort
from vigenere_tools.main import main


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        env = {k: v for k, v in os.environ.items() if not k.startswith("VIGENERE_")}
        patcher = mock.patch.dict(os.environ, env, clear=True)
        patcher.start()
        self.addCleanup(patcher.stop)
        self._tmp = TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.tmp = Path(self._tmp.name)
        self.config_path = self.tmp / "settings.json"
        self.history_path = self.tmp / "history.jsonl"
        history_patcher = mock.patch("vigenere_tools.history.HISTORY_PATH", self.history_path)
        history_patcher.start()
        self.addCleanup(history_patcher.stop)

    def run_cli(self, *argv: str) -> str:
        out = io.StringIO()
        with redirect_stdout(out):
            main(["--config", str(self.config_path), *argv])
        return out.getvalue()

    def test_encode_and_decode(self) -> None:
        self.assertEqual(self.run_cli("--no-history", "encode", "hello world"), "jvjah ewtcb\n")
        self.assertEqual(self.run_cli("--no-history", "decode", "jvjah ewtcb"), "hello world\n")
        self.assertFalse(self.history_path.exists())

    def test_setting_flags(self) -> None:
        out = self.run_cli(
            "--no-history", "encode", "a1b2", "--key", "ab", "--ignore-foreign"
        )
        self.assertEqual(out, "ac\n")
        out = self.run_cli("--no-history", "encode", "abc", "--variant", "beaufort-cipher", "--key", "key")
        self.assertEqual(out, "kdw\n")

    def test_invalid_key_exits_with_usage_error(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
            self.run_cli("--no-history", "encode", "hello", "--key", "a")
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("at least 2", err.getvalue())

    def test_files_and_history(self) -> None:
        in_file = self.tmp / "plain.txt"
        out_file = self.tmp / "cipher.txt"
        in_file.write_bytes("hello caf\xe9".encode("latin-1"))
        out = self.run_cli("encode", "--in-file", str(in_file), "--out-file", str(out_file))
        self.assertEqual(out, "")
        self.assertEqual(out_file.read_text(encoding="utf-8"), "jvjah kih\xe9")

        records = [json.loads(line) for line in self.history_path.read_text(encoding="utf-8").splitlines()]
        self.assertEqual(len(records), 1)
        self.assertEqual(records[0]["action"], "encode")
        self.assertEqual(records[0]["input_length"], 10)
        self.assertNotIn("text", records[0])

    def test_config_save_and_reuse(self) -> None:
        out = self.run_cli("--no-history", "config", "--key", "lemon", "--save")
        self.assertIn("key: 'lemon'", out)
        self.assertIn("Configuration saved.", out)
        self.assertEqual(self.run_cli("--no-history", "encode", "attack at dawn"), "lxfopv ef rnhr\n")

    def test_config_save_repairs_invalid_file(self) -> None:
        self.config_path.write_text(json.dumps({"key": "x"}), encoding="utf-8")
        out = self.run_cli("--no-history", "config", "--key", "lemon", "--save")
        self.assertIn("Configuration saved.", out)
        self.assertEqual(json.loads(self.config_path.read_text(encoding="utf-8"))["key"], "lemon")
        self.assertEqual(self.run_cli("--no-history", "encode", "attack at dawn"), "lxfopv ef rnhr\n")

    def test_variants_listing(self) -> None:
        out = self.run_cli("variants")
        for name in ("standard", "beaufort-cipher", "variant-beaufort-cipher"):
            self.assertIn(name, out)

    def test_decode_bytes_best_effort(self) -> None:
        self.assertEqual(decode_bytes_best_effort("ключ".encode("utf-8")), "ключ")
        self.assertEqual(decode_bytes_best_effort(b"caf\xe9"), "caf\xe9")
        self.assertEqual(decode_bytes_best_effort(b"abc", preferred_encoding="no-such-codec"), "abc")


if __name__ == "__main__":
    unittest.main()
