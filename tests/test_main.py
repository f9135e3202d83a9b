import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from minecraft_mod_updater import main as main_module
from minecraft_mod_updater.core import DownloadError, UpdateResult, UpdateStatus
from minecraft_mod_updater.utils import Config, DEFAULT_VERSION


class TestMain(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.config_path = Path(self._tmp.name) / "clientUpdate.json"

        patcher = mock.patch.object(main_module, "setup_logger",
                                    return_value=logging.getLogger("test_main"))
        patcher.start()
        self.addCleanup(patcher.stop)

        updater_patcher = mock.patch.object(main_module, "ModPackUpdater")
        self.updater_cls = updater_patcher.start()
        self.addCleanup(updater_patcher.stop)

    def run_main(self, *extra):
        argv = ["--config", str(self.config_path), "--countdown", "0", *extra]
        with mock.patch("builtins.print"):
            return main_module.main(argv)

    def test_success_exits_zero_and_creates_config(self) -> None:
        config = Config(version=DEFAULT_VERSION, directory="/x/mods")
        self.updater_cls.return_value.run.return_value = UpdateResult(
            status=UpdateStatus.COMPLETED, config=config,
        )

        self.assertEqual(self.run_main("--yes"), 0)

        self.assertEqual(Config.load(self.config_path).version, DEFAULT_VERSION)
        kwargs = self.updater_cls.call_args.kwargs
        self.assertTrue(kwargs["auto_confirm"])

    def test_operator_errors_exit_one(self) -> None:
        config = Config(version=DEFAULT_VERSION, directory="/x/plugins")
        for status in (UpdateStatus.INVALID_DIRECTORY, UpdateStatus.INVALID_MODS_PATH):
            self.updater_cls.return_value.run.return_value = UpdateResult(
                status=status, config=config,
            )
            with mock.patch.object(main_module, "countdown") as countdown:
                self.assertEqual(self.run_main(), 1)
            countdown.assert_not_called()

    def test_unrecoverable_errors_propagate(self) -> None:
        self.updater_cls.return_value.run.side_effect = DownloadError("offline", error_type="offline")

        with self.assertRaises(DownloadError):
            self.run_main()

    def test_custom_url_is_used(self) -> None:
        config = Config(version=DEFAULT_VERSION, directory="/x/mods")
        self.updater_cls.return_value.run.return_value = UpdateResult(
            status=UpdateStatus.COMPLETED, config=config,
        )

        self.run_main("--url", "https://example.invalid/other.zip")

        modpack = self.updater_cls.call_args.kwargs["modpack"]
        self.assertEqual(modpack.url, "https://example.invalid/other.zip")


if __name__ == "__main__":
    unittest.main()
