"""End-to-end tests for the click CLI against JSON data in tmp_path."""

import json

import pytest
from click.testing import CliRunner

from pos.infrastructure.cli.main import cli

ITEMS = [
    {
        "code": "COS001",
        "name": "Face Cream",
        "category_code": "01",
        "category_name": "Cosmetics",
        "unit_price": "3000",
    },
    {
        "code": "WINE001",
        "name": "Single Malt",
        "category_code": "09",
        "category_name": "Alcohol",
        "unit_price": "10000",
    },
]

PROMOTIONS = [
    {
        "code": "P1",
        "name": "Beauty spend 3000 save 300",
        "start_date": "2025-11-01",
        "end_date": "2025-11-30",
        "category_group": "01",
        "threshold": "3000",
        "award": "300",
    },
]


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "items.json").write_text(json.dumps(ITEMS), encoding="utf-8")
    (tmp_path / "promotions.json").write_text(json.dumps(PROMOTIONS), encoding="utf-8")
    return tmp_path


def _run(args, data_dir, **env):
    runner = CliRunner()
    return runner.invoke(cli, args, env={"POS_DATA_DIR": str(data_dir), **env})


class TestReceiptCompute:

    def test_prints_receipt(self, data_dir):
        result = _run(
            ["receipt", "compute", "--items", "COS001:1", "--date", "2025-11-10"], data_dir
        )
        assert result.exit_code == 0, result.output
        assert "Face Cream" in result.output
        assert "2,700" in result.output
        assert "Beauty spend 3000 save 300" in result.output

    def test_member_flag(self, data_dir):
        result = _run(
            ["receipt", "compute", "--items", "WINE001:1", "--member", "--date", "2025-12-01"],
            data_dir,
        )
        assert result.exit_code == 0, result.output
        assert "privileged member" in result.output
        assert "9,500" in result.output

    def test_member_rate_from_environment(self, data_dir):
        result = _run(
            ["receipt", "compute", "--items", "WINE001:1", "--member", "--date", "2025-12-01"],
            data_dir,
            POS_MEMBER_RATE="0.9",
        )
        assert result.exit_code == 0, result.output
        assert "9,000" in result.output

    def test_manual_discount_suffix(self, data_dir):
        result = _run(
            ["receipt", "compute", "--items", "COS001:1@100", "--date", "2025-12-01"],
            data_dir,
        )
        assert result.exit_code == 0, result.output
        assert "2,900" in result.output

    def test_unknown_item_warns(self, data_dir):
        result = _run(
            ["receipt", "compute", "--items", "COS001:1,GHOST:2", "--date", "2025-12-01"],
            data_dir,
        )
        assert result.exit_code == 0, result.output
        assert "Warning:" in result.output
        assert "GHOST" in result.output

    def test_bad_item_format(self, data_dir):
        result = _run(["receipt", "compute", "--items", "COS001"], data_dir)
        assert result.exit_code != 0
        assert "Expected 'ItemCode:Quantity[@Discount]'" in result.output

    def test_zero_quantity_is_an_error(self, data_dir):
        result = _run(["receipt", "compute", "--items", "COS001:0"], data_dir)
        assert result.exit_code == 1
        assert "must be positive" in result.output

    def test_corrupt_catalog_is_an_error(self, data_dir):
        (data_dir / "items.json").write_text("oops", encoding="utf-8")
        result = _run(["receipt", "compute", "--items", "COS001:1"], data_dir)
        assert result.exit_code == 1
        assert "Cannot read catalog" in result.output

    def test_wrong_data_dir_is_an_error(self, tmp_path):
        result = _run(["receipt", "compute", "--items", "WINE001:1"], tmp_path / "typo")
        assert result.exit_code == 1
        assert "Cannot read catalog" in result.output
        assert "Amount due" not in result.output

    def test_fractional_amount_due_rounds_half_up(self, data_dir):
        items = ITEMS + [
            {
                "code": "GUM001",
                "name": "Mint Gum",
                "category_code": "05",
                "category_name": "Snacks",
                "unit_price": "0.5",
            }
        ]
        (data_dir / "items.json").write_text(json.dumps(items), encoding="utf-8")
        result = _run(
            ["receipt", "compute", "--items", "GUM001:5", "--date", "2025-12-01"], data_dir
        )
        assert result.exit_code == 0, result.output
        amount_due = next(
            line for line in result.output.splitlines() if line.startswith("Amount due")
        )
        assert amount_due.split()[-1] == "3"


class TestListings:

    def test_catalog_list(self, data_dir):
        result = _run(["catalog", "list"], data_dir)
        assert result.exit_code == 0, result.output
        assert "COS001" in result.output
        assert "10,000" in result.output

    def test_promotion_list_for_date(self, data_dir):
        result = _run(["promotion", "list", "--date", "2025-12-01"], data_dir)
        assert result.exit_code == 0, result.output
        assert "No promotions found." in result.output

    def test_promotion_list_all(self, data_dir):
        result = _run(["promotion", "list"], data_dir)
        assert result.exit_code == 0, result.output
        assert "P1" in result.output
