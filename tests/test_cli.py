"""
CLI tests; the browser run is replaced so no Chromium is needed
"""

from pathlib import Path

import pytest

from router_dns import cli
from router_dns.core.errors import NavigationError
from router_dns.main import RunResult

ENV_VARS = ('ROUTER_URL', 'ROUTER_USER', 'ROUTER_PASS', 'DNS1', 'DNS2')


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_run(monkeypatch):
    """Replace DnsConfigurator.run with a coroutine that records its parameters"""
    seen = {}

    def install(error=None, screenshot=None):
        async def run(self):
            seen['params'] = self.params
            if error:
                self.screenshot_path = screenshot
                raise error
            return RunResult(dns1=self.params.dns1, dns2=self.params.dns2)

        monkeypatch.setattr(cli.DnsConfigurator, 'run', run)
        return seen

    return install


def test_missing_required_arguments_exit_with_usage_error():
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == 2


def test_environment_supplies_defaults(monkeypatch):
    monkeypatch.setenv('ROUTER_USER', 'admin')
    monkeypatch.setenv('ROUTER_PASS', 'secret')
    monkeypatch.setenv('DNS1', '9.9.9.9')

    args = cli.build_parser().parse_args([])

    assert args.url == 'http://192.168.1.1'
    assert (args.user, args.password, args.dns1, args.dns2) == ('admin', 'secret', '9.9.9.9', '')
    assert args.headful is False and args.debug is False


def test_success_prints_check_mark(fake_run, capsys):
    seen = fake_run()

    code = cli.main(['--user', 'admin', '--pass', 'secret', '--dns1', '1.1.1.1', '--dns2', '1.0.0.1',
                     '--url', 'http://10.0.0.1', '--headful'])

    assert code == 0
    assert capsys.readouterr().out.strip() == '✔ DNS updated to 1.1.1.1, 1.0.0.1'
    assert seen['params'].url == 'http://10.0.0.1'
    assert seen['params'].headful is True


def test_success_without_secondary(fake_run, capsys):
    fake_run()

    assert cli.main(['--user', 'admin', '--pass', 'secret', '--dns1', '1.1.1.1']) == 0
    assert capsys.readouterr().out.strip() == '✔ DNS updated to 1.1.1.1'


def test_invalid_dns_fails_before_launching(fake_run, capsys):
    seen = fake_run()

    code = cli.main(['--user', 'admin', '--pass', 'secret', '--dns1', 'not-an-ip'])

    assert code == 1
    assert '✖ Failed: Invalid run parameters' in capsys.readouterr().err
    assert 'params' not in seen


def test_run_failure_reports_error_and_screenshot(fake_run, capsys):
    fake_run(NavigationError("Could not reach DNS page automatically."), Path('/tmp/debug-1.png'))

    code = cli.main(['--user', 'admin', '--pass', 'secret', '--dns1', '1.1.1.1', '--debug'])

    err = capsys.readouterr().err
    assert code == 1
    assert '✖ Failed: Could not reach DNS page automatically.' in err
    assert 'Saved screenshot: /tmp/debug-1.png' in err


def test_unexpected_error_is_reported(fake_run, capsys):
    fake_run(RuntimeError("browser crashed"))

    assert cli.main(['--user', 'admin', '--pass', 'secret', '--dns1', '1.1.1.1']) == 1
    assert '✖ Failed: browser crashed' in capsys.readouterr().err
