import asyncio
import unittest
from unittest.mock import Mock, patch

from keepalive import __main__ as cli_mod
from keepalive import main as main_mod
from keepalive.config import DEFAULT_CONFIG, LOG_FORMAT


class TriggerTests(unittest.TestCase):
    def test_trigger_returns_plain_text_summary(self) -> None:
        with patch.object(main_mod, "run_on_demand", return_value="所有服务运行正常 (状态码 200).") as mock_run:
            resp = main_mod.trigger("anything")

        mock_run.assert_called_once()
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.body.decode("utf-8"), "所有服务运行正常 (状态码 200).")
        self.assertTrue(resp.media_type.startswith("text/plain"))

    def test_trigger_is_200_even_with_failures(self) -> None:
        with patch.object(
            main_mod, "run_on_demand", return_value="检测完成，发现 2 个异常，已发送通知。"
        ):
            resp = main_mod.trigger("")

        self.assertEqual(resp.status_code, 200)
        self.assertIn("2 个异常", resp.body.decode("utf-8"))

    def test_config_hides_secrets(self) -> None:
        with patch.object(main_mod.settings, "TG_BOT_TOKEN", "secret-token"), patch.object(
            main_mod.settings, "TG_CHAT_ID", "42"
        ):
            cfg = main_mod.config()

        self.assertTrue(cfg["notifications_enabled"])
        self.assertNotIn("secret-token", str(cfg))
        self.assertEqual(cfg["max_retries"], 3)
        self.assertEqual(cfg["retry_delay_s"], 5.0)

    def test_health(self) -> None:
        self.assertEqual(main_mod.health(), {"status": "ok"})


class OpenAPITests(unittest.TestCase):
    def test_openapi_schema_generation(self) -> None:
        schema = main_mod.app.openapi()

        self.assertIn("paths", schema)
        self.assertIn("/health", schema["paths"])
        self.assertIn("/config", schema["paths"])
        self.assertIn("/{path}", schema["paths"])

    def test_trigger_route_accepts_any_method(self) -> None:
        route = next(r for r in main_mod.app.routes if getattr(r, "path", None) == "/{path:path}")
        self.assertTrue({"GET", "POST", "HEAD"}.issubset(route.methods))




def _run_lifespan() -> None:
    async def enter_and_exit() -> None:
        async with main_mod.lifespan(main_mod.app):
            pass

    asyncio.run(enter_and_exit())


class LifespanTests(unittest.TestCase):
    def test_timer_disabled_when_interval_is_zero(self) -> None:
        with patch.object(main_mod.settings, "KEEPALIVE_INTERVAL_S", 0), patch(
            "keepalive.main.logging.basicConfig"
        ), patch.object(main_mod.threading, "Thread") as thread_cls:
            _run_lifespan()

        thread_cls.assert_not_called()

    def test_timer_thread_started_with_interval(self) -> None:
        with patch.object(main_mod.settings, "KEEPALIVE_INTERVAL_S", 60), patch(
            "keepalive.main.logging.basicConfig"
        ) as basic_config, patch.object(main_mod.threading, "Thread") as thread_cls:
            _run_lifespan()

        thread_cls.assert_called_once()
        kwargs = thread_cls.call_args.kwargs
        self.assertIs(kwargs["target"], main_mod.loop_forever)
        self.assertEqual(kwargs["args"], (DEFAULT_CONFIG, 60))
        self.assertTrue(kwargs["daemon"])
        thread_cls.return_value.start.assert_called_once_with()
        self.assertEqual(basic_config.call_args.kwargs["format"], LOG_FORMAT)


class CronEntryPointTests(unittest.TestCase):
    def test_main_runs_one_sweep_and_exits_zero(self) -> None:
        handle = Mock()
        with patch.object(cli_mod, "schedule_run", return_value=handle) as mock_schedule, patch.object(
            cli_mod, "build_notifier", return_value=None
        ), patch("keepalive.__main__.logging.basicConfig") as basic_config:
            rc = cli_mod.main()

        self.assertEqual(rc, 0)
        mock_schedule.assert_called_once_with(DEFAULT_CONFIG, notifier=None)
        handle.join.assert_called_once_with()
        self.assertEqual(basic_config.call_args.kwargs["format"], LOG_FORMAT)


if __name__ == "__main__":
    unittest.main()
