# tests/core/test_config_management.py
import json

import pytest

from contentguard.app import run_command
from contentguard.core.managers.config_manager import ConfigManager, config_manager
from contentguard.core.services.toolchain_service import (
    build_formatting_options,
    build_weights,
    get_content_validator,
    get_semantic_validator,
)
from contentguard.core.utils.path_utils import PathUtils

# Een standaard, voorspelbare configuratie voor onze tests
MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "WARNING"
    },
    "formatter": {
        "indent_size": 2,
        "max_line_length": 80
    },
    "content": {
        "extra_forbidden_terms": [],
        "weights": {}
    },
    "semantic": {
        "skip_link_min_length": 500
    }
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    Een fixture die een geïsoleerde testomgeving opzet voor de ConfigManager:
    - Plaatst een nep 'settings.json' bestand in een tijdelijke map.
    - Monkeypatched PathUtils om naar dit bestand te wijzen.
    - Herlaadt na de test de echte configuratie.
    """
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT))
    monkeypatch.setattr(PathUtils, 'get_settings_file', lambda: settings_file)

    # De singleton is al geladen; forceer herladen vanuit ons nep-bestand
    manager = ConfigManager()
    manager.reset()

    yield manager

    monkeypatch.undo()
    manager.reset()


def test_config_manager_is_singleton():
    assert ConfigManager() is config_manager


def test_packaged_settings_are_loaded():
    """Test of de meegeleverde settings.json gevonden en geladen wordt."""
    assert PathUtils.get_settings_file().is_file()
    assert config_manager.get_nested("formatter.indent_size") == 2


def test_config_manager_load(config_env):
    """Test of de manager de configuratie correct laadt."""
    config = config_env.get_all()
    assert config["debug"]["level"] == "WARNING"
    assert config["formatter"]["max_line_length"] == 80


def test_config_manager_get_nested(config_env):
    """Test het ophalen van geneste waarden."""
    assert config_env.get_nested("semantic.skip_link_min_length") == 500
    assert config_env.get_nested("non.existent.key", "default") == "default"
    assert config_env.get_nested("debug.level.too.deep", "x") == "x"


def test_config_manager_set_nested(config_env):
    """Test het aanpassen van waarden in het geheugen."""
    config_env.set_nested("debug.level", "INFO")
    assert config_env.get_nested("debug.level") == "INFO"

    # Nieuwe sectie
    config_env.set_nested("cli.progress_min_files", 5)
    assert config_env.get_nested("cli.progress_min_files") == 5

    # Een waarde is geen sectie
    with pytest.raises(ValueError):
        config_env.set_nested("debug.level.deeper", "x")


@pytest.mark.parametrize("assignment, key, value", [
    ("formatter.indent_size=4", "formatter.indent_size", 4),
    ("formatter.indent_char=\t", "formatter.indent_char", "\t"),
    ("debug.level=INFO", "debug.level", "INFO"),
    ("content.extra_forbidden_terms=[\"hypergrowth\"]", "content.extra_forbidden_terms", ["hypergrowth"]),
    ("content.weights={\"forbidden_term_penalty\": 40}", "content.weights", {"forbidden_term_penalty": 40}),
    ("semantic.skip_link_min_length = 800", "semantic.skip_link_min_length", 800),
])
def test_config_manager_apply_override(config_env, assignment, key, value):
    """Test het toepassen van een KEY=VALUE override; de waarde wordt als JSON gelezen."""
    assert config_env.apply_override(assignment) == (key, value)
    assert config_env.get_nested(key) == value


@pytest.mark.parametrize("assignment", ["formatter.indent_size", "=4", "formatter..indent_size=4"])
def test_config_manager_invalid_override(config_env, assignment):
    with pytest.raises(ValueError):
        config_env.apply_override(assignment)


def test_config_manager_section_is_a_copy(config_env):
    section = config_env.section("formatter")
    section["indent_size"] = 8
    assert config_env.get_nested("formatter.indent_size") == 2
    assert config_env.section("missing") == {}


def test_config_manager_reset(config_env):
    """Test of de reset-functie de configuratie herlaadt vanaf schijf."""
    config_env.set_nested("debug.level", "DEBUG")
    config_env.reset()
    assert config_env.get_nested("debug.level") == "WARNING"


def test_missing_settings_file_gives_empty_config(tmp_path, monkeypatch):
    monkeypatch.setattr(PathUtils, 'get_settings_file', lambda: tmp_path / "missing.json")
    config_manager.reset()
    try:
        assert config_manager.get_all() == {}
    finally:
        monkeypatch.undo()
        config_manager.reset()


# --- Tests voor het omzetten van configuratie naar de modellen ---

def test_formatting_options_from_config(config_env):
    options = build_formatting_options()
    assert options.max_line_length == 80

    # Waarden van de command line winnen; None betekent "niet opgegeven"
    options = build_formatting_options(indent_size=4, max_line_length=None)
    assert options.indent_size == 4
    assert options.max_line_length == 80


def test_extra_forbidden_terms_from_config(config_env):
    config_env.set_nested("content.extra_forbidden_terms", ["hypergrowth"])
    result = get_content_validator().validate_content("Our hypergrowth plan.")
    assert not result.is_valid
    assert "hypergrowth" in result.errors[0]


def test_weights_from_config(config_env):
    config_env.set_nested("content.weights", {"forbidden_term_penalty": 40})
    assert build_weights().forbidden_term_penalty == 40


def test_semantic_settings_from_config(config_env):
    validator = get_semantic_validator()
    assert validator.skip_link_min_length == 500
    assert "Consider adding skip navigation links for keyboard users" in \
        validator.generate_recommendations("<main>" + "x" * 600 + "</main>")


# --- Tests voor --set op de command line ---

def test_cli_set_overrides_formatter(config_env, capsys):
    """Test of '--set' vóór het commando de formatter-instellingen aanpast."""
    code = run_command(["--set", "formatter.indent_size=4", "format"], "<div><p>x</p></div>")
    assert code == 0
    assert "\n    <p>\n" in capsys.readouterr().out
    assert config_env.get_nested("formatter.indent_size") == 4


def test_cli_set_extends_forbidden_terms(config_env, capsys):
    code = run_command(
        ["--set=content.extra_forbidden_terms=[\"hypergrowth\"]", "validate"],
        "Our hypergrowth plan."
    )
    assert code == 1
    assert "hypergrowth" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["--set"], ["--set", "no-equals-sign", "format"]])
def test_cli_set_usage_errors(config_env, argv, capsys):
    assert run_command(argv) == 2
    assert "❌" in capsys.readouterr().out
