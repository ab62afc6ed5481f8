import pytest

import main
import tools
from fakes import fake_toolchain


@pytest.fixture
def calls(monkeypatch):
    calls = []
    monkeypatch.setattr(tools, 'default_toolchain', lambda: fake_toolchain(calls))
    return calls


@pytest.fixture
def source(tmp_path):
    path = tmp_path / 'prog.c'
    path.write_text('int main(void) { return 2; }\n')
    return path


class TestMain:
    def test_full_pipeline(self, calls, source):
        assert main.main([str(source)]) == 0
        assert [name for name, _ in calls] == ['preprocessor', 'compiler', 'linker']

    def test_lex_only(self, calls, source):
        assert main.main(['--lex', '-S', str(source)]) == 0
        assert [name for name, _ in calls] == ['preprocessor', 'compiler']

    def test_stage_failure_code(self, monkeypatch, source):
        calls = []
        monkeypatch.setattr(tools, 'default_toolchain', lambda: fake_toolchain(calls, preprocessor=3))
        assert main.main([str(source)]) == 3
        assert len(calls) == 1

    def test_two_sources_is_usage_error(self, calls, monkeypatch, capsys):
        def fail(name):
            raise AssertionError('source should not be checked')
        monkeypatch.setattr(main, 'validate_source', fail)

        assert main.main(['a.c', 'b.c']) == 1
        err = capsys.readouterr().err
        assert "Unexpected argument 'b.c'" in err
        assert 'usage: fcc' in err
        assert calls == []

    def test_unknown_option(self, calls, source, capsys):
        assert main.main(['--emit', str(source)]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Unknown option '--emit'")

    def test_missing_argument_message(self, calls, capsys):
        assert main.main(['-S']) == 1
        assert capsys.readouterr().err.startswith('Error: missing file argument.')

    def test_missing_source(self, calls, tmp_path, capsys):
        assert main.main([str(tmp_path / 'missing.c')]) == 1
        assert 'does not exist' in capsys.readouterr().err
        assert calls == []

    def test_help_skips_validation(self, calls, capsys):
        assert main.main(['--help', 'missing.c', 'extra.c']) == 0
        assert 'usage: fcc' in capsys.readouterr().out
        assert calls == []

    def test_cli_exits_with_pipeline_code(self, monkeypatch, source):
        monkeypatch.setattr(tools, 'default_toolchain', lambda: fake_toolchain([], linker=5))
        monkeypatch.setattr('sys.argv', ['fcc', str(source)])
        with pytest.raises(SystemExit) as e:
            main.cli()
        assert e.value.code == 5
