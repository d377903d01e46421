import io
import json

import pytest

from error_printer import ErrorPrinter
from error_style import ErrorStyle


def make_printer(style, pretty=False):
    stdout, stderr = io.BytesIO(), io.BytesIO()
    return ErrorPrinter(style, pretty, stdout=stdout, stderr=stderr), stdout, stderr


def test_silent_prints_nothing():
    printer, stdout, stderr = make_printer(ErrorStyle.SILENT)

    printer.print("boom")

    assert stdout.getvalue() == b""
    assert stderr.getvalue() == b""


def test_stderr_writes_plain_line():
    printer, stdout, stderr = make_printer(ErrorStyle.STDERR)

    printer.print(ValueError("bad document"))

    assert stdout.getvalue() == b""
    assert stderr.getvalue() == b"bad document\n"


def test_json_compact_envelope_goes_to_stdout():
    printer, stdout, stderr = make_printer(ErrorStyle.JSON)

    printer.print("missing.yaml does not exist")

    assert stdout.getvalue() == b'{"yaml-error":"missing.yaml does not exist"}\n'
    assert stderr.getvalue() == b""


def test_json_pretty_envelope_uses_two_space_indent():
    printer, stdout, _ = make_printer(ErrorStyle.JSON, pretty=True)

    printer.print("oops")

    assert stdout.getvalue() == b'{\n  "yaml-error": "oops"\n}\n'


def test_json_envelope_escapes_message():
    printer, stdout, _ = make_printer(ErrorStyle.JSON)
    message = 'found "quote"\n  in line 2'

    printer.print(message)

    output = stdout.getvalue().decode("utf-8")
    assert output.count("\n") == 1
    assert json.loads(output) == {"yaml-error": message}


def test_failed_write_is_fatal():
    class Closed(io.BytesIO):
        def write(self, data):
            raise BrokenPipeError(32, "Broken pipe")

    printer = ErrorPrinter(ErrorStyle.STDERR, stdout=io.BytesIO(), stderr=Closed())

    with pytest.raises(SystemExit) as excinfo:
        printer.print("boom")

    assert excinfo.value.code == 1
