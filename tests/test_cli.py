"""
Тесты командной строки.
"""

import json

from isbn_core.cli import build_parser, main


class TestCli:
    """Тесты команд CLI."""

    def test_parser(self):
        args = build_parser().parse_args(["hyphenate", "9788535902778", "-v"])

        assert args.command == "hyphenate"
        assert args.isbns == ["9788535902778"]
        assert args.verbose is True

    def test_hyphenate(self, capsys):
        assert main(["hyphenate", "9788535902778", "0306406152"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out == ["978-85-359-0277-8", "0-306-40615-2"]

    def test_hyphenate_invalid(self, capsys):
        assert main(["hyphenate", "str"]) == 1
        assert capsys.readouterr().out == ""

    def test_validate(self, capsys):
        assert main(["validate", "978-85-359-0277-8"]) == 0
        assert "978-85-359-0277-8" in capsys.readouterr().out

        assert main(["validate", "978-85-359-0277-8", "str"]) == 1

    def test_validate_rejects_surrounding_text(self, capsys):
        assert main(["validate", "ISBN 978-85-359-0277-8"]) == 1

        row = capsys.readouterr().out.splitlines()[-1]
        assert "да" not in row

    def test_convert(self, capsys):
        assert main(["convert", "0306406152", "978-85-359-0277-8"]) == 0

        out = capsys.readouterr().out
        assert "9780306406157" in out
        assert "8535902775" in out

    def test_convert_979(self, capsys):
        assert main(["convert", "9791090636071"]) == 1

    def test_info(self, capsys):
        assert main(["info", "978-1-86197-876-9"]) == 0

        out = capsys.readouterr().out
        assert "86197" in out
        assert "English language" in out

    def test_config_and_ranges(self, tmp_path, capsys, ranges_file):
        config_path = tmp_path / "isbn_config.json"
        config_path.write_text(
            json.dumps({"accept_lowercase_x": True}), encoding="utf-8"
        )

        code = main(
            [
                "hyphenate",
                "9780312345679",
                "--config",
                str(config_path),
                "--ranges",
                str(ranges_file),
            ]
        )

        assert code == 0
        assert capsys.readouterr().out.strip() == "978-0-3-1234567-9"
