from pathlib import Path

from herocalc.data import paths


def test_get_definitions_path_base_path(tmp_path: Path) -> None:
    assert paths.get_definitions_path(tmp_path) == tmp_path


def test_get_definitions_path_source_repo_exists() -> None:
    definitions_path = paths.get_definitions_path()
    assert definitions_path.name == "definitions"
    assert definitions_path.exists()
    assert (definitions_path / "heroes.json").exists()
    assert (definitions_path / "skills.json").exists()
