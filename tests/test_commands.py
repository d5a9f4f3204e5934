"""
Testy komend CLI — bez sieci i bez gita.

API i git są podmieniane na poziomie modułów komend (monkeypatch).
"""

import argparse
import json

import pytest

from api_client import ApiError
from apiglot.cli import build_parser
from apiglot.commands import generate as cmd_generate
from apiglot.commands import init as cmd_init
from apiglot.commands import project as cmd_project
from apiglot.commands import translate as cmd_translate
from data_model.translation import LastModified


ASTRO_I18N = """
import { defineConfig } from 'astro/config';
export default defineConfig({
    i18n: { locales: ['en', 'pt-BR', 'pl'], defaultLocale: 'en' },
});
"""

INDEX_PAGE = "<style>h1 { color: red; }</style>\n<h1>Welcome</h1>\n"


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def astro_project(tmp_path, monkeypatch):
    """Minimalny projekt Astro w katalogu roboczym."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "apiglot.config.json").write_text(
        json.dumps({
            "projectId": "42",
            "apiKey": "sk_test",
            "projectInfo": {
                "projectName": "Docs",
                "sourceLanguage": {"code": "en", "name": "English"},
                "namespaces": ["common", "broken"],
            },
        }),
        encoding="utf-8",
    )
    (tmp_path / "astro.config.mjs").write_text(ASTRO_I18N, encoding="utf-8")
    pages = tmp_path / "src" / "pages"
    pages.mkdir(parents=True)
    (pages / "index.astro").write_text(INDEX_PAGE, encoding="utf-8")
    (pages / "readme.md").write_text("# not a page", encoding="utf-8")
    (pages / "blog").mkdir()
    return tmp_path


@pytest.fixture
def fake_api(monkeypatch, project_info):
    """Podmienia zapytania API komendy translate; zwraca listę payloadów."""
    payloads = []

    def fake_translation(client, config, payload):
        payloads.append(payload)
        return f"<h1>lang-{payload['target_language_id']}</h1>"

    monkeypatch.setattr(cmd_translate, "get_project_info", lambda client, config: project_info)
    monkeypatch.setattr(cmd_translate, "request_translation", fake_translation)
    monkeypatch.setattr(
        cmd_translate, "get_last_modified",
        lambda path: LastModified(source="git", timestamp="2024-05-01T10:00:00+02:00"),
    )
    return payloads


def _translate_args(**overrides):
    values = {"pages_dir": None, "delay": 0.0, "dry_run": False}
    values.update(overrides)
    return argparse.Namespace(**values)


# =============================================================================
# translate
# =============================================================================


class TestTranslate:
    def test_writes_localized_pages(self, astro_project, fake_api):
        cmd_translate.run(_translate_args())

        pages = astro_project / "src" / "pages"
        assert (pages / "pt-br" / "index.astro").read_text(encoding="utf-8") == (
            "<h1>lang-2</h1>\n\n<style>h1 { color: red; }</style>"
        )
        assert (pages / "pl" / "index.astro").read_text(encoding="utf-8") == (
            "<h1>lang-3</h1>\n\n<style>h1 { color: red; }</style>"
        )
        assert not (pages / "en").exists()
        assert not (pages / "pl" / "readme.md").exists()

    def test_payload(self, astro_project, fake_api):
        cmd_translate.run(_translate_args())

        assert [p["target_language_id"] for p in fake_api] == [2, 3]
        first = fake_api[0]
        assert first["source_language_id"] == 1
        assert first["source_file"]["name"] == "index.astro"
        assert first["source_file"]["content"] == "\n<h1>Welcome</h1>\n"
        assert first["source_file"]["size"] == len(INDEX_PAGE.encode("utf-8"))
        assert first["source_file"]["last_modified"] == "2024-05-01T10:00:00+02:00"
        assert len({p["batch_id"] for p in fake_api}) == 1

    def test_api_error_stops_locales_of_that_file(self, astro_project, fake_api, monkeypatch):
        pages = astro_project / "src" / "pages"
        (pages / "about.astro").write_text("<p>About</p>", encoding="utf-8")

        def failing(client, config, payload):
            if payload["source_file"]["name"] == "about.astro":
                raise ApiError(500, "API request failed with status 500: boom")
            fake_api.append(payload)
            return "ok"

        monkeypatch.setattr(cmd_translate, "request_translation", failing)
        cmd_translate.run(_translate_args())

        assert not (pages / "pt-br" / "about.astro").exists()
        assert not (pages / "pl" / "about.astro").exists()
        assert (pages / "pt-br" / "index.astro").exists()
        assert (pages / "pl" / "index.astro").exists()

    def test_delay_after_each_translation(self, astro_project, fake_api, monkeypatch):
        sleeps = []
        monkeypatch.setattr(cmd_translate.time, "sleep", sleeps.append)
        cmd_translate.run(_translate_args(delay=0.5))

        assert sleeps == [0.5, 0.5]

    def test_no_delay_after_api_error(self, astro_project, fake_api, monkeypatch):
        (astro_project / "src" / "pages" / "about.astro").write_text("<p>About</p>", encoding="utf-8")

        def failing(client, config, payload):
            if payload["source_file"]["name"] == "about.astro":
                raise ApiError(500, "API request failed with status 500: boom")
            return "ok"

        sleeps = []
        monkeypatch.setattr(cmd_translate, "request_translation", failing)
        monkeypatch.setattr(cmd_translate.time, "sleep", sleeps.append)
        cmd_translate.run(_translate_args(delay=0.5))

        # tylko dwa udane tłumaczenia index.astro
        assert sleeps == [0.5, 0.5]

    def test_zero_delay_never_sleeps(self, astro_project, fake_api, monkeypatch):
        sleeps = []
        monkeypatch.setattr(cmd_translate.time, "sleep", sleeps.append)
        cmd_translate.run(_translate_args())

        assert sleeps == []

    def test_write_error_counted_and_other_locales_written(self, astro_project, fake_api, capsys):
        pages = astro_project / "src" / "pages"
        # katalog docelowy zajęty przez zwykły plik
        (pages / "pl").write_text("", encoding="utf-8")

        cmd_translate.run(_translate_args())

        out = capsys.readouterr().out
        assert "Błąd zapisu pliku" in out
        assert "Gotowe z 1 błędami" in out
        assert (pages / "pt-br" / "index.astro").exists()
        assert (pages / "pl").is_file()
        assert len(fake_api) == 2

    def test_unknown_locale_skipped(self, astro_project, fake_api):
        (astro_project / "astro.config.mjs").write_text(
            "defineConfig({ i18n: { locales: ['en', 'de', 'pl'], defaultLocale: 'en' } })",
            encoding="utf-8",
        )
        cmd_translate.run(_translate_args())

        pages = astro_project / "src" / "pages"
        assert not (pages / "de").exists()
        assert (pages / "pl" / "index.astro").exists()

    def test_no_i18n_prints_suggestion(self, astro_project, fake_api, capsys):
        (astro_project / "astro.config.mjs").write_text(
            "export default defineConfig({});", encoding="utf-8"
        )
        cmd_translate.run(_translate_args())

        out = capsys.readouterr().out
        assert "defaultLocale: 'en'" in out
        assert fake_api == []

    def test_dry_run_does_not_call_api(self, astro_project, fake_api):
        cmd_translate.run(_translate_args(dry_run=True))

        assert fake_api == []
        assert not (astro_project / "src" / "pages" / "pl").exists()

    def test_missing_pages_dir(self, astro_project, fake_api):
        with pytest.raises(SystemExit):
            cmd_translate.run(_translate_args(pages_dir="does/not/exist"))

    def test_project_info_error_exits(self, astro_project, monkeypatch):
        def boom(client, config):
            raise ApiError(401, "API request failed with status 401: Unauthorized")

        monkeypatch.setattr(cmd_translate, "get_project_info", boom)
        with pytest.raises(SystemExit):
            cmd_translate.run(_translate_args())


# =============================================================================
# generate ts-types
# =============================================================================


def test_generate_ts_types(astro_project, monkeypatch):
    def fake_fetch(client, config, namespace):
        if namespace == "broken":
            raise ApiError(404, "API request failed with status 404: Not Found")
        return {"hello": "Hello"}

    monkeypatch.setattr(cmd_generate, "fetch_namespace", fake_fetch)
    cmd_generate.run_ts_types(argparse.Namespace(path="types"))

    resources = (astro_project / "types" / "resources.d.ts").read_text(encoding="utf-8")
    assert '"common"' in resources
    assert '"broken"' not in resources
    assert (astro_project / "types" / "i18next.d.ts").exists()


# =============================================================================
# project / init
# =============================================================================


def test_project_languages_fallback_to_project_info(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "apiglot.config.json").write_text(
        json.dumps({"projectInfo": {"targetLanguages": [{"code": "de"}, {"code": "fr"}]}}),
        encoding="utf-8",
    )
    cmd_project.run_languages(argparse.Namespace())

    out = capsys.readouterr().out
    assert "- de" in out
    assert "- fr" in out


def test_project_languages_empty(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    cmd_project.run_languages(argparse.Namespace())
    assert "Brak języków docelowych" in capsys.readouterr().out


def test_init_writes_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        cmd_init, "get_project_info_from_remote",
        lambda client, project_id, api_key: {"projectName": "Docs", "namespaces": ["common"]},
    )
    cmd_init.run(argparse.Namespace(
        project_id="42", api_key="sk_test", host="https://api.apiglot.com", force=True,
    ))

    data = json.loads((tmp_path / "apiglot.config.json").read_text(encoding="utf-8"))
    assert data == {
        "projectId": "42",
        "apiKey": "sk_test",
        "projectInfo": {"projectName": "Docs", "namespaces": ["common"]},
    }


# =============================================================================
# cli
# =============================================================================


class TestParser:
    def test_translate(self):
        args = build_parser().parse_args(["translate", "--delay", "0", "--dry-run"])
        assert args.func is cmd_translate.run
        assert args.delay == 0.0
        assert args.dry_run is True

    def test_nested_commands(self):
        parser = build_parser()
        assert parser.parse_args(["project", "languages"]).func is cmd_project.run_languages
        assert parser.parse_args(["project", "info"]).func is cmd_project.run_info
        args = parser.parse_args(["generate", "ts-types", "-p", "out"])
        assert args.func is cmd_generate.run_ts_types
        assert args.path == "out"

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


def test_info_masks_api_key(astro_project, capsys):
    from apiglot.commands import info as cmd_info

    cmd_info.run(argparse.Namespace())
    out = capsys.readouterr().out
    assert "sk_test" not in out
    assert "Docs" in out


def test_project_info_prints_json(astro_project, monkeypatch, capsys):
    calls = []

    def fake_get(self, path, bearer_token=None):
        calls.append(path)
        return {"name": "Docs"}

    monkeypatch.setattr(cmd_project.ApiglotClient, "get", fake_get)
    cmd_project.run_info(argparse.Namespace())

    assert calls == ["/projects/42/info"]
    assert '"name": "Docs"' in capsys.readouterr().out
