import subprocess
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from minecraft_mod_updater.core.loader import FabricInstaller


RUN = "minecraft_mod_updater.core.loader.subprocess.run"


class TestFabricInstaller(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.minecraft = Path(self._tmp.name) / ".minecraft"
        self.versions = self.minecraft / "versions"
        self.installer = FabricInstaller("fabric-installer-0.6.1.51.jar")
        self.messages = []
        self.installer.set_progress_callback(self.messages.append)

    def test_detects_matching_fabric_profile(self) -> None:
        (self.versions / "fabric-loader-0.9.2+build.206-1.16.2").mkdir(parents=True)
        self.assertTrue(self.installer.is_installed(self.minecraft, "1.16.2"))

    def test_other_versions_do_not_count(self) -> None:
        (self.versions / "fabric-loader-0.11.3-1.16.5").mkdir(parents=True)
        (self.versions / "1.16.2").mkdir()
        (self.versions / "fabric-loader-0.9.2-1.16.2.json").write_text("{}")
        self.assertFalse(self.installer.is_installed(self.minecraft, "1.16.2"))

    def test_missing_versions_directory(self) -> None:
        self.assertFalse(self.installer.is_installed(self.minecraft, "1.16.2"))
        self.assertIn("> No existing minecraft versions found.", self.messages)

    def test_build_command(self) -> None:
        self.assertEqual(
            self.installer.build_command("/games/.minecraft", "1.16.2"),
            ["java", "-jar", "fabric-installer-0.6.1.51.jar", "client",
             "-dir", "/games/.minecraft", "-mcversion", "1.16.2"],
        )

    def test_install_success(self) -> None:
        completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="ok")
        with mock.patch(RUN, return_value=completed) as run:
            self.assertTrue(self.installer.install(self.minecraft, "1.16.2"))
        self.assertEqual(run.call_args[0][0][:3], ["java", "-jar", "fabric-installer-0.6.1.51.jar"])
        self.assertIn("> Install complete.", self.messages)

    def test_install_failure_is_not_raised(self) -> None:
        completed = subprocess.CompletedProcess(args=[], returncode=1, stdout="boom")
        with mock.patch(RUN, return_value=completed):
            with self.assertLogs("minecraft_mod_updater.core.loader", level="ERROR"):
                self.assertFalse(self.installer.install(self.minecraft, "1.16.2"))

    def test_missing_java_is_not_raised(self) -> None:
        with mock.patch(RUN, side_effect=FileNotFoundError("java")):
            with self.assertLogs("minecraft_mod_updater.core.loader", level="ERROR"):
                self.assertFalse(self.installer.install(self.minecraft, "1.16.2"))

    def test_ensure_installed_skips_when_present(self) -> None:
        (self.versions / "fabric-loader-0.9.2-1.16.2").mkdir(parents=True)
        with mock.patch(RUN) as run:
            self.assertIsNone(self.installer.ensure_installed(self.minecraft, "1.16.2"))
        run.assert_not_called()

    def test_ensure_installed_runs_installer(self) -> None:
        completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="")
        with mock.patch(RUN, return_value=completed) as run:
            self.assertTrue(self.installer.ensure_installed(self.minecraft, "1.16.2"))
        run.assert_called_once()


if __name__ == "__main__":
    unittest.main()
