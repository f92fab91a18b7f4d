from __future__ import annotations

import pytest

from docsmoke import cli

from .fakes import FakeExecutor

DOCUMENT = "intro\n```python\nprint(1)\n```\nmid\n```python\nprint(YOUR_API_KEY)\n```\n"


@pytest.fixture
def workdir(tmp_path, monkeypatch, docsmoke_env):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_main_runs_provider_document(workdir, capsys) -> None:
    (workdir / "cohere.txt").write_text(DOCUMENT, encoding="utf-8")
    executor = FakeExecutor()
    executor.queue_output(stdout="1")
    executor.queue_output(stdout="sk-cohere")

    code = cli.main(["cohere", "python", "--delay", "0"], executor=executor)

    assert code == 0
    assert [request.code for request in executor.requests] == ["print(1)", "print(sk-cohere)"]
    assert all(request.runtime_revision_id == "rev-py" for request in executor.requests)
    assert "2 snippets succeeded" in capsys.readouterr().out


def test_main_returns_one_when_a_snippet_fails(workdir) -> None:
    (workdir / "cohere.txt").write_text(DOCUMENT, encoding="utf-8")
    executor = FakeExecutor()
    executor.queue_output(stderr="NameError")
    executor.queue_output()

    assert cli.main(["cohere", "python", "--delay", "0"], executor=executor) == 1
    assert len(executor.requests) == 2


def test_main_reads_file_override(workdir) -> None:
    (workdir / "guide.md").write_text("```typescript\nconsole.log(1)\n```\n", encoding="utf-8")
    executor = FakeExecutor()
    executor.queue_output(stdout="1")

    assert cli.main(["cohere", "--file", "guide.md", "--delay", "0"], executor=executor) == 0
    assert executor.requests[0].language == "typescript"
    assert executor.requests[0].runtime_revision_id == "rev-ts"


def test_main_missing_document_runs_nothing(workdir, capsys) -> None:
    executor = FakeExecutor()

    assert cli.main(["cohere", "python", "--delay", "0"], executor=executor) == 0
    assert executor.requests == []


def test_main_without_provider_fails_before_running(workdir, capsys) -> None:
    executor = FakeExecutor()

    assert cli.main([], executor=executor) == 1
    assert executor.requests == []
    assert "provider name" in capsys.readouterr().err


def test_main_missing_secret_fails_before_running(workdir, capsys) -> None:
    (workdir / "elevenlabs.txt").write_text(DOCUMENT, encoding="utf-8")
    executor = FakeExecutor()

    assert cli.main(["elevenlabs", "python"], executor=executor) == 1
    assert executor.requests == []
    assert "[config]" in capsys.readouterr().err


def test_unknown_language_is_rejected_by_parser(workdir) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["cohere", "ruby"], executor=FakeExecutor())
    assert exc_info.value.code == 2


def test_parser_defaults() -> None:
    args = cli.build_parser().parse_args(["cohere"])
    assert args.provider == "cohere"
    assert args.language == "typescript"
    assert args.file is None
    assert args.delay is None


def test_main_invalid_log_level_is_config_error(workdir, monkeypatch, capsys) -> None:
    monkeypatch.setenv("DOCSMOKE_LOG_LEVEL", "LOUD")
    executor = FakeExecutor()

    assert cli.main(["cohere", "python"], executor=executor) == 1
    assert executor.requests == []
    assert "[config] DOCSMOKE_LOG_LEVEL" in capsys.readouterr().err
