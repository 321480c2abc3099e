"""
CLI Tests.
"""

import json

import pytest
from fieldtrack.main import main, parse_mode
from fieldtrack.services.region_classifier import RegionDefaultMode


class TestCli:
    """Command-line entry point."""

    def test_classify(self, capsys):
        assert main(["classify", "14.6349", "-90.5069"]) == 0
        out = capsys.readouterr().out
        assert "Country: Guatemala" in out
        assert "Region:  Guatemala (Capital)" in out

    def test_classify_with_country(self, capsys):
        assert main(["classify", "21.0", "-86.9", "--country", "Mexico"]) == 0
        assert "Quintana Roo" in capsys.readouterr().out

    def test_classify_unknown(self, capsys):
        """No country match reports no region, like the API does."""
        assert main(["classify", "0", "0"]) == 0
        out = capsys.readouterr().out
        assert "Country: (unknown)" in out
        assert "Region:  (none)" in out
        assert "Región detectada" not in out

    def test_classify_bad_mode(self, capsys):
        assert main(["classify", "0", "0", "--mode", "loud"]) == 1
        assert "Unknown mode" in capsys.readouterr().err

    def test_regions(self, capsys):
        assert main(["regions", "Costa Rica"]) == 0
        assert capsys.readouterr().out.split("\n")[:2] == ["Cartago", "Guanacaste"]

    def test_regions_unknown_country(self):
        assert main(["regions", "Atlantis"]) == 1

    def test_summary(self, tmp_path, capsys):
        visits = tmp_path / "visits.json"
        visits.write_text(json.dumps([
            {"latitude": 14.6349, "longitude": -90.5069},
            {"latitude": 16.9, "longitude": -89.9},
            {"latitude": 16.9, "longitude": -89.9, "state": "Petén", "country": "Guatemala"},
        ]), encoding="utf-8")

        assert main(["summary", str(visits), "--country", "Guatemala"]) == 0
        out = capsys.readouterr().out
        assert "VISITS BY REGION: Guatemala" in out
        assert "Petén" in out
        assert "TOTAL" in out

    def test_summary_missing_file(self, tmp_path, capsys):
        assert main(["summary", str(tmp_path / "missing.json"), "--country", "Guatemala"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_summary_rejects_non_list(self, tmp_path):
        visits = tmp_path / "visits.json"
        visits.write_text(json.dumps({"latitude": 1}), encoding="utf-8")
        assert main(["summary", str(visits), "--country", "Guatemala"]) == 1

    def test_summary_rejects_non_object_records(self, tmp_path, capsys):
        visits = tmp_path / "visits.json"
        visits.write_text(json.dumps([[14.6, -90.5]]), encoding="utf-8")

        assert main(["summary", str(visits), "--country", "Guatemala"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_parse_mode(self):
        assert parse_mode("Capture") == RegionDefaultMode.CAPTURE
        assert parse_mode("heatmap") == RegionDefaultMode.HEAT_MAP
        with pytest.raises(ValueError):
            parse_mode("other")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
