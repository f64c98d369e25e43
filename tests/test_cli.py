from glossa import cli

BODY = '[[["I am not you. ","Mi estas ne vin.",,,0],["You are not me.","Vi estas ne min.",,,0]],,"eo"]'


def test_extract_prints_text_from_saved_body(tmp_path, capsys):
    path = tmp_path / "response.txt"
    path.write_text(BODY, encoding="utf-8")

    assert cli.main(["--extract", str(path)]) == 0
    assert capsys.readouterr().out == "I am not you. You are not me.\n"


def test_extract_missing_file(tmp_path, capsys):
    assert cli.main(["--extract", str(tmp_path / "missing.txt")]) == 1
    assert "Could not read" in capsys.readouterr().out


def test_list_languages(capsys):
    assert cli.main(["--list-languages"]) == 0
    out = capsys.readouterr().out
    assert "eo     Esperanto" in out
    assert "fr     French" in out


def test_translate_phrases_with_echo_provider(capsys):
    exit_code = cli.main(["-p", "echo", "-t", "eo", "hello", "world"])

    assert exit_code == 0
    assert capsys.readouterr().out == "hello\nworld\n"


def test_phrases_from_input_file(isolated_config, capsys):
    (isolated_config / "phrases.txt").write_text("one\n\ntwo\n", encoding="utf-8")

    exit_code = cli.main(["-p", "echo", "-i", "phrases.txt", "zero"])

    assert exit_code == 0
    assert capsys.readouterr().out == "zero\none\ntwo\n"


def test_verbose_summary_goes_to_stderr(capsys):
    assert cli.main(["-p", "echo", "-v", "hi"]) == 0
    captured = capsys.readouterr()
    assert "Translation complete." in captured.err
    assert "1 translated / 1 total" in captured.err


def test_unknown_language_exits_with_error(capsys):
    assert cli.main(["-p", "echo", "-t", "Elvish", "hello"]) == 1
    assert "Unknown language 'Elvish'" in capsys.readouterr().out


def test_invalid_configuration_exits_with_error(monkeypatch, capsys):
    monkeypatch.setenv("GLOSSA_TIMEOUT", "zero")

    assert cli.main(["-p", "echo", "hello"]) == 1
    assert "GLOSSA_TIMEOUT" in capsys.readouterr().out


def test_missing_phrases_is_a_usage_error(capsys):
    import pytest

    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2


def test_execute_translation_reports_failures(monkeypatch):
    from glossa.configuration import GlossaConfig
    from glossa.errors import FetchError
    from glossa.providers import GoogleGtxTranslationProvider

    def refuse(self, request):
        raise FetchError("offline")

    monkeypatch.setattr(GoogleGtxTranslationProvider, "fetch_raw", refuse)
    monkeypatch.setattr("glossa.translator.time.sleep", lambda _seconds: None)

    exit_code, summary, message = cli.execute_translation(
        phrases=["hello"],
        target_language="eo",
        source_language=None,
        provider="gtx",
        settings=GlossaConfig(),
        non_interactive=True,
        verbose=False,
        provider_debug=False,
    )

    assert exit_code == 1
    assert message is None
    assert summary.failed_phrases == 1


def test_extract_rejects_non_utf8_body(tmp_path, capsys):
    path = tmp_path / "response.bin"
    path.write_bytes(b'[[["caf\xe9","x",,,0]]')

    assert cli.main(["--extract", str(path)]) == 1
    assert "Could not read" in capsys.readouterr().out


def test_input_file_rejects_non_utf8_phrases(isolated_config, capsys):
    (isolated_config / "phrases.txt").write_bytes(b"caf\xe9\n")

    assert cli.main(["-p", "echo", "-i", "phrases.txt"]) == 1
    assert "Could not read phrases.txt" in capsys.readouterr().out


def test_verbose_summary_names_languages(capsys):
    assert cli.main(["-p", "echo", "-v", "-s", "eo", "-t", "fr", "saluton"]) == 0
    assert "Esperanto -> French" in capsys.readouterr().err


def test_execute_translation_reports_unexpected_errors(monkeypatch):
    from glossa.configuration import GlossaConfig
    from glossa.providers import EchoTranslationProvider

    def explode(self, request):
        raise RuntimeError("boom")

    monkeypatch.setattr(EchoTranslationProvider, "translate", explode)

    exit_code, summary, message = cli.execute_translation(
        phrases=["hello"],
        target_language="eo",
        source_language=None,
        provider="echo",
        settings=GlossaConfig(),
        non_interactive=True,
        verbose=False,
        provider_debug=False,
    )

    assert exit_code == 1
    assert summary is None
    assert message.startswith("boom\n")


def test_timeout_option_overrides_configured_timeout(monkeypatch, capsys):
    seen = {}

    def fake_execute(**kwargs):
        seen.update(kwargs)
        return 0, None, None

    monkeypatch.setattr(cli, "execute_translation", fake_execute)

    assert cli.main(["--timeout", "2.5", "hello"]) == 0
    assert seen["settings"].GLOSSA_TIMEOUT == 2.5


def test_timeout_option_must_be_positive(capsys):
    import pytest

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--timeout", "0", "hello"])
    assert excinfo.value.code == 2
