"""
Tests del script de línea de comandos.
"""

import json

import pytest

from inmoflow.scripts.run_ai import build_parser, main


@pytest.mark.unit
class TestCli:
    """Parsing de argumentos y comandos que no dependen del driver."""

    def test_parser_email_bullets(self):
        args = build_parser().parse_args(
            ["email", "--to", "Ana", "--bullet", "uno", "--bullet", "dos"]
        )

        assert args.command == "email"
        assert args.bullets == ["uno", "dos"]

    def test_parser_rejects_unknown_style(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["ad", "--property-id", "prop-1", "--style", "poetic"])

    def test_kpis_output(self, capsys):
        main(["kpis"])

        data = json.loads(capsys.readouterr().out)
        assert data["kpis"]["activeProperties"] >= 0
        assert [s["stage"] for s in data["funnel"]] == ["new", "qualified", "visiting", "offer", "won"]

    def test_unknown_lead_exits_with_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--driver", "mock", "match", "--lead-id", "lead-404"])

        assert exc_info.value.code == 1
