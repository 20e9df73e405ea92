from pathlib import Path

import pytest

from pysquads.ingest import load_records_from_csv, load_roster_csv, parse_roster_text, rows_to_records


def _sample_roster() -> str:
    return """id,name,attack_defense,stamina,skills,team_player,physicality
a1,Artan Berisha,2,8,7,9,8
b2,Blerim Gashi,5,7,8,6,7
c3,Driton Krasniqi,9,6,9,5,6
d4,Elton Shala,4,9,6,8,9
"""


def _write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_load_records_from_csv_with_default_mapping(tmp_path):
    path = _write(tmp_path, "roster.csv", _sample_roster())
    records = load_records_from_csv(path)
    assert [record.player_id for record in records] == ["a1", "b2", "c3", "d4"]
    first = records[0]
    assert first.name == "Artan Berisha"
    assert first.attack_defense == 2
    assert first.team_player == 9


def test_custom_mapping_combines_columns(tmp_path):
    content = """Player ID,First,Last,AD,Stamina,Skills,Team,Physical
7,Ilir,Morina,6,5,5,5,5
"""
    path = _write(tmp_path, "custom.csv", content)
    mapping = {
        "player_id": "Player ID",
        "name": "First|Last",
        "attack_defense": "AD",
        "stamina": "Stamina",
        "skills": "Skills",
        "team_player": "Team",
        "physicality": "Physical",
    }
    rows = load_roster_csv(path, mapping=mapping)
    assert rows[0].raw_name == "Ilir Morina"
    record = rows_to_records(rows)[0]
    assert record.player_id == "7"
    assert record.attack_defense == 6


def test_missing_ratings_use_defaults_and_name_as_id():
    records = parse_roster_text("name,skills\nGenc Hoxha,9\n")
    record = records[0]
    assert record.player_id == "Genc Hoxha"
    assert record.skills == 9
    assert record.stamina == 7
    assert record.attack_defense == 5


def test_decimal_comma_ratings_are_accepted():
    records = parse_roster_text('id,name,skills\nx,Comma,"7,5"\n')
    assert records[0].skills == pytest.approx(7.5)


def test_invalid_rating_reports_row():
    with pytest.raises(ValueError, match="Row 3"):
        parse_roster_text("id,skills\na,5\nb,great\n")


def test_out_of_range_rating_reports_row():
    with pytest.raises(ValueError, match="Row 2"):
        parse_roster_text("id,stamina\na,12\n")


def test_rows_without_identity_are_skipped():
    records = parse_roster_text("id,name,skills\n,,5\nz,Zef,6\n")
    assert [record.player_id for record in records] == ["z"]
