"""Tests for the shelfprice CLI."""

import json
import os
import subprocess
import sys
from datetime import date
from pathlib import Path

import pytest

from shelfprice.cli import main
from shelfprice.inventory import render_listing, sample_inventory

REPO_ROOT = Path(__file__).resolve().parents[1]
PRICING_DATE = date(2025, 1, 10)


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, tmp_path):
    # .env is looked up from the working directory; delenv also makes
    # monkeypatch remove SHELFPRICE_TODAY again if a .env sets it
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SHELFPRICE_TODAY", raising=False)


def test_default_listing(capsys):
    main([])
    out = capsys.readouterr().out
    lines = out.split("\n")
    assert lines[0] == "Supermarket Inventory:"
    assert lines[1] == ""
    assert lines[2] == "SKU: D001, Name: Milk, Brand: BrandA, Price: $5.99"
    assert lines[3] == "Discounted Price: $3.00"
    assert "Discounted Price: $1.50" in out
    assert "Discounted Price: $4.99" in out
    assert out.endswith("\n\n")


def test_date_option(capsys):
    main(["--date", "2025-01-10"])
    out = capsys.readouterr().out
    assert "Discounted Price: $3.00" in out


def test_json_output(capsys):
    main(["--json", "--date", "2025-01-10"])
    data = json.loads(capsys.readouterr().out)
    assert data["date"] == "2025-01-10"
    assert [p["sku"] for p in data["products"]] == ["D001", "P001", "C001"]
    assert data["products"][1]["discounted_price"] == "1.50"


def test_config_heading(capsys, tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[listing]\nheading = "Shelf report"\n')
    main(["--config", str(path)])
    assert capsys.readouterr().out.startswith("Shelf report\n\n")


def test_env_date(capsys, monkeypatch):
    monkeypatch.setenv("SHELFPRICE_TODAY", "2025-01-10")
    main(["--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["date"] == "2025-01-10"


def test_dotenv_in_working_directory(capsys, tmp_path):
    """A .env next to where the command runs sets the pricing date."""
    (tmp_path / ".env").write_text("SHELFPRICE_TODAY=2025-01-10\n")
    main(["--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["date"] == "2025-01-10"


def test_verbose_keeps_stdout_to_listing(capsys):
    main(["-v", "--date", "2025-01-10"])
    out = capsys.readouterr().out
    assert out == render_listing(sample_inventory(PRICING_DATE), PRICING_DATE)


def test_invalid_date_exits():
    with pytest.raises(SystemExit) as exc:
        main(["--date", "not-a-date"])
    assert exc.value.code == 2


def test_python_m_entry_point(tmp_path):
    """`python -m shelfprice -v` prints the listing on stdout, logs on stderr."""
    env = {**os.environ, "PYTHONPATH": str(REPO_ROOT)}
    env.pop("SHELFPRICE_TODAY", None)
    result = subprocess.run(
        [sys.executable, "-m", "shelfprice", "-v", "--date", "2025-01-10"],
        capture_output=True,
        text=True,
        cwd=tmp_path,
        env=env,
    )
    assert result.returncode == 0
    assert result.stdout == render_listing(
        sample_inventory(PRICING_DATE), PRICING_DATE
    )
    assert "Pricing 3 products as of 2025-01-10" in result.stderr
    assert "SKU:" not in result.stderr


def test_import_main_module_does_not_run(capsys):
    import shelfprice.__main__  # noqa: F401

    assert capsys.readouterr().out == ""
