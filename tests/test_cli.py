import json

from artifact_resolver.cli import main


def test_resolve_against_sample_registry(clean_env, capsys):
    exit_code = main(["resolve", "--name", "Berliner Gramophone", "--matched"])

    output = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert output["provenance"] == "registry"
    assert output["id"] == "sample-1"
    assert output["photos"] == []


def test_resolve_unconfirmed_guess(clean_env, capsys):
    exit_code = main(["resolve", "--name", "Berliner Gramophone", "--date", "1890"])

    output = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert output == {
        "provenance": "guess",
        "name": "Berliner Gramophone",
        "date": "1890",
        "description": None,
    }


def test_resolve_with_registry_and_suggestions(clean_env, capsys, tmp_path):
    registry = tmp_path / "registry.csv"
    registry.write_text(
        "Name,Date,Description,Photos\n"
        "Berliner Gramophone Model D,1895,Gramophone,a.jpg\n",
        encoding="utf-8",
    )

    exit_code = main([
        "resolve", "--name", "Berliner Gramophone", "--matched",
        "--registry", str(registry), "--threshold", "0.9", "--suggest",
    ])

    output = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert output["provenance"] == "guess"
    assert output["suggestions"][0]["id"] == "artifact-1"


def test_missing_registry_file(clean_env, capsys, tmp_path):
    exit_code = main([
        "resolve", "--name", "Berliner Gramophone",
        "--registry", str(tmp_path / "missing.csv"),
    ])

    assert exit_code == 1
    assert capsys.readouterr().out == ""


def test_analyze_requires_api_key(clean_env, capsys):
    exit_code = main(["analyze", "--image-url", "https://example.org/photo.jpg"])

    assert exit_code == 1


def test_unreadable_registry_file(clean_env, capsys, tmp_path):
    registry = tmp_path / "registry.csv"
    registry.write_bytes("Name,Date,Description,Photos\nMus\xe9e Horn,1900,Horn,\n".encode("latin-1"))

    exit_code = main(["resolve", "--name", "Horn", "--matched", "--registry", str(registry)])

    assert exit_code == 1
    assert capsys.readouterr().out == ""
