"""Tests for config resolver module."""

from itertools import combinations
from pathlib import Path
from unittest.mock import patch

import pytest

from dict_dispatch.config import ConfigResolver, create_default_config, probe_host, resolve_config
from dict_dispatch.models import Backend, HostEnvironment, SpeechCommand

MAC_APPS = ["Easydict", "Bob", "Eudic", "GoldenDict", "Dictionary"]


def make_host(platform="darwin", apps=(), exes=()):
    return HostEnvironment(
        platform=platform,
        applications=frozenset(apps),
        executables=frozenset(exes),
    )


class TestSelectBackend:
    """Tests for ConfigResolver.select_backend."""

    @pytest.fixture
    def resolver(self):
        return ConfigResolver()

    def test_macos_prefers_easydict(self, resolver):
        host = make_host(apps=MAC_APPS)

        assert resolver.select_backend(host) is Backend.EASYDICT

    def test_macos_bob_before_eudic(self, resolver):
        host = make_host(apps=["Bob", "Eudic", "Dictionary"])

        assert resolver.select_backend(host) is Backend.BOB

    def test_macos_eudic_before_goldendict(self, resolver):
        host = make_host(apps=["Eudic", "GoldenDict"])

        assert resolver.select_backend(host) is Backend.EUDIC

    def test_macos_goldendict_on_path(self, resolver):
        host = make_host(apps=["Dictionary"], exes=["goldendict"])

        assert resolver.select_backend(host) is Backend.GOLDENDICT

    def test_macos_falls_back_to_dictionary_app(self, resolver):
        host = make_host(apps=["Dictionary"])

        assert resolver.select_backend(host) is Backend.OSX_DICTIONARY

    def test_macos_nothing_installed(self, resolver):
        assert resolver.select_backend(make_host()) is None

    def test_linux_goldendict(self, resolver):
        host = make_host(platform="linux", exes=["goldendict", "espeak"])

        assert resolver.select_backend(host) is Backend.GOLDENDICT

    def test_linux_ignores_mac_apps(self, resolver):
        host = make_host(platform="linux", apps=["Easydict", "Bob"])

        assert resolver.select_backend(host) is None

    def test_windows_goldendict(self, resolver):
        host = make_host(platform="win32", exes=["GoldenDict"])

        assert resolver.select_backend(host) is Backend.GOLDENDICT

    def test_unsupported_platform(self, resolver):
        host = make_host(platform="freebsd14", exes=["goldendict"])

        assert resolver.select_backend(host) is None

    @pytest.mark.parametrize("platform", ["darwin", "linux", "win32", "cygwin"])
    def test_at_most_one_backend_for_every_combination(self, resolver, platform):
        exes = ["goldendict", "GoldenDict", "say", "festival", "espeak"]
        for r in range(len(MAC_APPS) + 1):
            for apps in combinations(MAC_APPS, r):
                for exe_count in range(len(exes) + 1):
                    host = make_host(platform=platform, apps=apps, exes=exes[:exe_count])
                    backend = resolver.select_backend(host)
                    assert backend is None or isinstance(backend, Backend)


class TestSelectSpeechCommand:
    """Tests for ConfigResolver.select_speech_command."""

    @pytest.fixture
    def resolver(self):
        return ConfigResolver()

    def test_macos_say(self, resolver):
        assert resolver.select_speech_command(make_host(exes=["say"])) is SpeechCommand.SAY

    def test_macos_without_say(self, resolver):
        assert resolver.select_speech_command(make_host(exes=["espeak"])) is SpeechCommand.NONE

    def test_linux_prefers_festival(self, resolver):
        host = make_host(platform="linux", exes=["festival", "espeak"])

        assert resolver.select_speech_command(host) is SpeechCommand.FESTIVAL

    def test_linux_espeak(self, resolver):
        host = make_host(platform="linux", exes=["espeak"])

        assert resolver.select_speech_command(host) is SpeechCommand.ESPEAK

    def test_linux_none(self, resolver):
        assert resolver.select_speech_command(make_host(platform="linux")) is SpeechCommand.NONE


class TestResolve:
    """Tests for ConfigResolver.resolve."""

    def test_goldendict_is_cli_invocable(self):
        host = make_host(platform="linux", exes=["goldendict"])

        config = ConfigResolver().resolve(host)

        assert config.backend is Backend.GOLDENDICT
        assert config.cli_invocable is True
        assert config.goldendict_executable == "goldendict"

    def test_windows_executable_name_kept(self):
        host = make_host(platform="win32", exes=["GoldenDict"])

        config = ConfigResolver().resolve(host)

        assert config.goldendict_executable == "GoldenDict"

    def test_goldendict_app_bundle_on_macos(self):
        base = create_default_config(applications_dir=Path("/Applications"))
        host = make_host(apps=["GoldenDict"])

        config = ConfigResolver(base).resolve(host)

        assert config.backend is Backend.GOLDENDICT
        assert config.goldendict_executable == str(
            Path("/Applications/GoldenDict.app/Contents/MacOS/GoldenDict")
        )

    def test_scripting_app_not_cli_invocable(self):
        config = ConfigResolver().resolve(make_host(apps=["Bob"], exes=["say"]))

        assert config.backend is Backend.BOB
        assert config.cli_invocable is False
        assert config.speech_command is SpeechCommand.SAY

    def test_nothing_found(self):
        config = ConfigResolver().resolve(make_host(platform="linux"))

        assert config.backend is None
        assert config.has_backend is False

    def test_tunables_kept_from_base_config(self):
        base = create_default_config(easydict_port=9090, target_language="en")

        config = ConfigResolver(base).resolve(make_host(apps=["Easydict"]))

        assert config.easydict_port == 9090
        assert config.target_language == "en"

    def test_goldendict_bundle_where_it_was_found(self, tmp_path):
        bundle = tmp_path / "HomeApps" / "GoldenDict.app"
        host = HostEnvironment(
            platform="darwin",
            applications=frozenset({"GoldenDict"}),
            app_paths={"GoldenDict": bundle},
        )

        config = ConfigResolver().resolve(host)

        assert config.goldendict_executable == str(bundle / "Contents" / "MacOS" / "GoldenDict")

    def test_bob_bundle_recorded(self, tmp_path):
        bundle = tmp_path / "HomeApps" / "Bob.app"
        host = HostEnvironment(
            platform="darwin",
            applications=frozenset({"Bob"}),
            app_paths={"Bob": bundle},
        )

        config = ConfigResolver().resolve(host)

        assert config.backend is Backend.BOB
        assert config.bob_app_path == bundle


class TestResolveConfig:
    """Tests for resolve_config."""

    def test_overrides_applied(self):
        host = make_host(platform="linux", exes=["goldendict", "espeak"])

        config = resolve_config(host, overrides={"speech_command": "none", "target_language": "ja"})

        assert config.backend is Backend.GOLDENDICT
        assert config.speech_command is SpeechCommand.NONE
        assert config.target_language == "ja"

    def test_backend_override_updates_cli_flag(self):
        host = make_host(platform="linux", exes=["goldendict"])

        config = resolve_config(host, overrides={"backend": "easydict"})

        assert config.backend is Backend.EASYDICT
        assert config.cli_invocable is False

    def test_unknown_backend_override_kept(self):
        config = resolve_config(make_host(), overrides={"backend": "lingoes"})

        assert config.backend == "lingoes"
        assert config.cli_invocable is False

    def test_probes_host_when_not_given(self):
        host = make_host(platform="linux", exes=["goldendict"])

        with patch("dict_dispatch.config.resolver.probe_host", return_value=host) as mock_probe:
            config = resolve_config()

        mock_probe.assert_called_once()
        assert config.backend is Backend.GOLDENDICT

    def test_saved_applications_dir_used_for_bundle_path(self):
        host = make_host(apps=["GoldenDict"])

        config = resolve_config(host, overrides={"applications_dir": "/Users/me/Apps"})

        assert config.goldendict_executable == str(
            Path("/Users/me/Apps/GoldenDict.app/Contents/MacOS/GoldenDict")
        )

    def test_saved_applications_dir_scanned_first(self):
        host = make_host(platform="linux", exes=["goldendict"])

        with patch("dict_dispatch.config.resolver.probe_host", return_value=host) as mock_probe:
            resolve_config(overrides={"applications_dir": "/Users/me/Apps"})

        dirs = mock_probe.call_args.kwargs["application_dirs"]
        assert dirs[0] == Path("/Users/me/Apps")
        assert Path("/Applications") in dirs


class TestProbeHost:
    """Tests for probe_host."""

    def test_finds_app_bundles(self, tmp_path):
        (tmp_path / "Bob.app").mkdir()
        (tmp_path / "Dictionary.app").mkdir()
        (tmp_path / "Unrelated.app").mkdir()

        with patch("dict_dispatch.config.resolver.shutil.which", return_value=None):
            host = probe_host(platform="darwin", application_dirs=[tmp_path])

        assert host.applications == frozenset({"Bob", "Dictionary"})
        assert host.executables == frozenset()

    def test_skips_app_bundles_off_macos(self, tmp_path):
        (tmp_path / "Bob.app").mkdir()

        with patch("dict_dispatch.config.resolver.shutil.which", return_value=None):
            host = probe_host(platform="linux", application_dirs=[tmp_path])

        assert host.applications == frozenset()

    def test_finds_executables(self):
        def fake_which(name):
            return f"/usr/bin/{name}" if name in ("goldendict", "espeak") else None

        with patch("dict_dispatch.config.resolver.shutil.which", side_effect=fake_which):
            host = probe_host(platform="linux")

        assert host.executables == frozenset({"goldendict", "espeak"})
        assert host.is_linux is True

    def test_records_where_bundles_were_found(self, tmp_path):
        home_apps = tmp_path / "HomeApps"
        (home_apps / "GoldenDict.app").mkdir(parents=True)

        with patch("dict_dispatch.config.resolver.shutil.which", return_value=None):
            host = probe_host(platform="darwin", application_dirs=[tmp_path / "Apps", home_apps])

        assert host.app_path("GoldenDict") == home_apps / "GoldenDict.app"
        assert ConfigResolver().resolve(host).goldendict_executable == str(
            home_apps / "GoldenDict.app" / "Contents" / "MacOS" / "GoldenDict"
        )

    def test_first_directory_wins(self, tmp_path):
        for directory in ("first", "second"):
            (tmp_path / directory / "Bob.app").mkdir(parents=True)

        with patch("dict_dispatch.config.resolver.shutil.which", return_value=None):
            host = probe_host(
                platform="darwin",
                application_dirs=[tmp_path / "first", tmp_path / "second"],
            )

        assert host.app_path("Bob") == tmp_path / "first" / "Bob.app"
