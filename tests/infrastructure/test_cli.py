"""End-to-end tests of the ``pos`` command through click's test runner."""

import json
import logging

import pytest
from click.testing import CliRunner

from pos.infrastructure.cli.console import MenuKey, decode_key
from pos.infrastructure.cli.main import cli
from pos.infrastructure.logging_config import LOG_FILE_NAME

# Tab presses needed to reach each menu entry from the top
ADD_CUSTOMER = "\t" * 5
EXIT_FROM_TOP = "\t" * 9
EXIT_FROM_ADD_CUSTOMER = "\t" * 4


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


def _invoke(tmp_path, keys):
    return CliRunner().invoke(cli, input=keys, env={"POS_DATA_DIR": str(tmp_path)})


class TestDecodeKey:

    @pytest.mark.parametrize(
        "raw, key",
        [
            ("\x1b[A", MenuKey.UP),
            ("\x1b[B", MenuKey.DOWN),
            ("\xe0H", MenuKey.UP),
            ("\t", MenuKey.TAB),
            ("\r", MenuKey.ENTER),
        ],
    )
    def test_known_keys(self, raw, key):
        assert decode_key(raw) is key

    def test_other_keys_ignored(self):
        assert decode_key("x") is None


class TestCli:

    def test_exit_from_menu(self, tmp_path):
        result = _invoke(tmp_path, EXIT_FROM_TOP + "\r")

        assert result.exit_code == 0
        assert "--- POS Console ---" in result.output
        assert not (tmp_path / "products.json").exists()

    def test_add_customer_persists(self, tmp_path):
        keys = ADD_CUSTOMER + "\r" + "C1\nAlice\n\n" + EXIT_FROM_ADD_CUSTOMER + "\r"
        result = _invoke(tmp_path, keys)

        assert result.exit_code == 0
        assert "Customer 'Alice' added successfully." in result.output
        customers = json.loads((tmp_path / "customers.json").read_text(encoding="utf-8"))
        assert customers == {"C1": {"Name": "Alice"}}

    def test_writes_json_log(self, tmp_path):
        _invoke(tmp_path, EXIT_FROM_TOP + "\r")

        lines = (tmp_path / "logs" / LOG_FILE_NAME).read_text(encoding="utf-8").splitlines()
        first = json.loads(lines[0])
        assert first["message"] == "POS console started"
        assert first["data_dir"] == str(tmp_path)

    def test_corrupt_data_file_reported(self, tmp_path):
        (tmp_path / "products.json").write_text("{broken", encoding="utf-8")
        result = _invoke(tmp_path, "\n" + EXIT_FROM_TOP + "\r")

        assert result.exit_code == 0
        assert "Error loading products.json" in result.output
        assert (tmp_path / "products.json").read_text(encoding="utf-8") == "{broken"

    def test_end_of_input_exits_cleanly(self, tmp_path):
        result = _invoke(tmp_path, "")
        assert result.exit_code == 0
        assert "Exiting." in result.output
