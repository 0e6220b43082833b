from __future__ import annotations

import subprocess

from networker.automation.linkedin_connect import LinkedInConnector, build_connect_script, escape_applescript
from networker.models import ProfileRecord


class FakeRunner:
    """Records osascript invocations; replies with the queued stdout values."""

    def __init__(self, outputs=None, fail_on=None):
        self.outputs = list(outputs or [])
        self.fail_on = fail_on
        self.scripts = []

    def __call__(self, args, input=None, capture_output=False, text=False, check=False):
        self.scripts.append(input)
        if self.fail_on is not None and len(self.scripts) == self.fail_on:
            raise subprocess.CalledProcessError(1, args, output="", stderr="Chrome got an error")
        stdout = self.outputs.pop(0) if self.outputs else ""
        return subprocess.CompletedProcess(args, 0, stdout=stdout, stderr="")


class FixedRandom:
    def uniform(self, a, b):
        return (a + b) / 2


def _profile(name, url):
    return ProfileRecord(name=name, linkedin_url=url, is_target_contact=True)


def _connector(runner, sleeps):
    return LinkedInConnector(runner=runner, sleep=sleeps.append, rng=FixedRandom(), min_delay=2, max_delay=4, page_load_seconds=1.5)


def test_escape_applescript_collapses_and_escapes():
    assert escape_applescript('a  "b"\n  c\\d') == 'a \\"b\\" c\\\\d'


def test_connect_script_targets_invite_button():
    script = build_connect_script()
    assert 'aria-label^=\\"Invite\\"' in script
    assert "btn.click()" in script


def test_connect_opens_tab_then_injects():
    runner = FakeRunner(outputs=["3\n", ""])
    sleeps = []

    ok = _connector(runner, sleeps).connect(_profile("Jane Roe", "https://www.linkedin.com/in/janeroe"))

    assert ok is True
    assert 'URL:"https://www.linkedin.com/in/janeroe"' in runner.scripts[0]
    assert "tell tab 3 of front window" in runner.scripts[1]
    assert "execute javascript" in runner.scripts[1]
    assert sleeps == [1.5]


def test_connect_all_pauses_between_profiles():
    runner = FakeRunner(outputs=["1", "", "2", ""])
    sleeps = []
    profiles = [
        _profile("Jane Roe", "https://www.linkedin.com/in/janeroe"),
        _profile("Max Power", "https://www.linkedin.com/in/maxpower"),
    ]

    primed = _connector(runner, sleeps).connect_all(profiles)

    assert primed == 2
    # page load, randomized pause, page load
    assert sleeps == [1.5, 3.0, 1.5]


def test_osascript_failure_is_non_fatal(caplog):
    runner = FakeRunner(outputs=["1", "", "2", ""], fail_on=1)
    sleeps = []
    profiles = [
        _profile("Jane Roe", "https://www.linkedin.com/in/janeroe"),
        _profile("Max Power", "https://www.linkedin.com/in/maxpower"),
    ]

    primed = _connector(runner, sleeps).connect_all(profiles)

    assert primed == 1
    assert "osascript failed" in caplog.text


def test_missing_osascript_binary_is_non_fatal():
    def runner(*args, **kwargs):
        raise FileNotFoundError("osascript")

    connector = LinkedInConnector(runner=runner, sleep=lambda s: None)
    assert connector.connect(_profile("Jane Roe", "https://www.linkedin.com/in/janeroe")) is False


def test_profile_without_url_is_skipped():
    runner = FakeRunner()
    assert _connector(runner, []).connect(ProfileRecord(name="No Url")) is False
    assert runner.scripts == []
