"""
Tests for the entry point:
- Argument parsing
- Template construction from configuration
- Full runs over a scripted console
"""

import random

import pytest
from zoo_console.config import ZOO, ZooConfig, SpeciesSpec
from zoo_console.console import ScriptedConsole
from zoo_console.core import Gender
from zoo_console.main import (
    parse_args,
    sanitize_seed,
    build_templates,
    build_zoo,
    main,
)


class TestArgs:
    """Tests for command-line parsing."""

    def test_defaults(self):
        args = parse_args([])

        assert args.seed is None
        assert args.log_level == "WARNING"
        assert args.census_docx is None
        assert args.census_xlsx is None

    def test_options(self):
        args = parse_args(["--seed", "12", "--log-level", "DEBUG", "--census-xlsx", "out.xlsx"])

        assert args.seed == 12
        assert args.log_level == "DEBUG"
        assert args.census_xlsx == "out.xlsx"

    def test_rejects_bad_log_level(self):
        with pytest.raises(SystemExit):
            parse_args(["--log-level", "LOUD"])

    def test_sanitize_seed(self):
        assert sanitize_seed(7) == 7

        generated = sanitize_seed(None)
        assert 0 <= generated < 100_000


class TestBuild:
    """Tests for wiring the default zoo."""

    def test_default_templates(self):
        templates = build_templates()

        assert [t.name for t in templates] == ["snake", "owl", "tiger", "goose"]
        assert [t.sound for t in templates] == ["Ш-ш-ш-ш", "ух - хух", "РРРР", "га-га-га"]
        assert all(t.gender == Gender.MALE for t in templates)

    def test_default_zoo(self):
        zoo = build_zoo(random.Random(0), console=ScriptedConsole())

        assert len(zoo.enclosures) == ZOO.species_count
        assert zoo.exit_command == "quit"
        for enclosure in zoo.enclosures:
            assert ZOO.occupancy_min <= len(enclosure) <= ZOO.occupancy_max

    def test_custom_config(self):
        config = ZooConfig(
            species=[SpeciesSpec("owl", "hoot", "FEMALE")],
            occupancy_min=3,
            occupancy_max=3,
            exit_command="escape",
        )
        zoo = build_zoo(random.Random(0), config=config, console=ScriptedConsole())

        assert len(zoo.enclosures) == 1
        assert len(zoo.enclosures[0]) == 3
        assert zoo.exit_command == "escape"


class TestMain:
    """Tests for full program runs."""

    def test_quit(self):
        console = ScriptedConsole(["quit"])

        assert main(["--seed", "1"], console=console) == 0
        assert console.lines_read == 1

    def test_browse_then_quit(self):
        console = ScriptedConsole(["3", "abc", "quit"])

        assert main(["--seed", "1"], console=console) == 0

        inhabitants = console.screens[1].splitlines()
        assert inhabitants[0] == "Inhabitants of enclosure 3"
        assert all("tiger" in line for line in inhabitants[1:])

    def test_end_of_input_exits_cleanly(self):
        console = ScriptedConsole(["1"])

        assert main(["--seed", "1"], console=console) == 0

    def test_same_seed_same_session(self):
        first = ScriptedConsole(["1", "2", "3", "4", "quit"])
        second = ScriptedConsole(["1", "2", "3", "4", "quit"])

        main(["--seed", "99"], console=first)
        main(["--seed", "99"], console=second)

        assert first.text == second.text

    def test_writes_census(self, tmp_path):
        docx_path = tmp_path / "census.docx"
        xlsx_path = tmp_path / "census.xlsx"
        console = ScriptedConsole(["quit"])

        code = main(
            ["--seed", "4", "--census-docx", str(docx_path), "--census-xlsx", str(xlsx_path)],
            console=console,
        )

        assert code == 0
        assert docx_path.exists()
        assert xlsx_path.exists()

    @pytest.mark.parametrize("option", ["--census-docx", "--census-xlsx"])
    def test_unwritable_census_path(self, tmp_path, option):
        """Test a census path in a missing directory fails with status 2."""
        console = ScriptedConsole(["quit"])
        path = tmp_path / "missing" / "census.out"

        assert main(["--seed", "4", option, str(path)], console=console) == 2
        assert not path.exists()
        assert console.lines_read == 0
