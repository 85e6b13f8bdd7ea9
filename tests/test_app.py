import json
from types import SimpleNamespace
from unittest import mock

import pytest

from ws2812tool.animations import MOVING_PIXEL_INTERVAL, AnimationType, Animator
from ws2812tool.app import (
    PORT_NAME_PREFIX,
    STATUS_PORT_NOT_OPENED,
    STATUS_WRITE_FAILED,
    Application,
    main,
    normalize_port_name,
    parse_led_count,
)
from ws2812tool.comport import ComPortError
from ws2812tool.log import Logger, LogLevel
from ws2812tool.logview import LogView
from ws2812tool.manualcontrol import one_for_all
from ws2812tool.settings import Settings, Ws2812Settings
from ws2812tool.ws2812 import Ws2812Color, encode


class FakePort:
    def __init__(self, fail=False, fail_write=False):
        self.is_open = False
        self.fail = fail
        self.fail_write = fail_write
        self.opened = []
        self.written = []

    def open(self, name, baudrate):
        self.opened.append((name, baudrate))
        if self.fail:
            raise ComPortError("cannot open")
        self.is_open = True

    def close(self):
        self.is_open = False

    def write(self, data):
        if self.fail_write:
            raise ComPortError("write failed")
        self.written.append(data)
        return len(data)


def make_app(tmp_path, port=None, settings=None):
    return Application(
        settings=settings,
        port=port if port is not None else FakePort(),
        config_path=tmp_path / "app.json",
        logger=Logger(),
        log_view=LogView(),
    )


def test_normalize_adds_prefix():
    assert normalize_port_name("COM10") == PORT_NAME_PREFIX + "COM10"


def test_normalize_keeps_prefixed_and_device_paths():
    assert normalize_port_name(PORT_NAME_PREFIX + "COM3") == PORT_NAME_PREFIX + "COM3"
    assert normalize_port_name("/dev/ttyUSB0") == "/dev/ttyUSB0"


@pytest.mark.parametrize(
    "text, expected",
    [("16", 16), ("1", 1), ("1024", 1024), ("0", 8), ("1025", 8), ("abc", 8), ("", 8)],
)
def test_parse_led_count(text, expected):
    assert parse_led_count(text, 8) == expected


def test_serial_open_success(tmp_path):
    port = FakePort()
    app = make_app(tmp_path, port)
    app.serial_open()
    assert port.opened == [(PORT_NAME_PREFIX + "COM10", 2000000)]
    assert app.port_state == "COM10 opened, 2000000 bps"
    assert app.serial_open_called


def test_serial_open_failure(tmp_path):
    app = make_app(tmp_path, FakePort(fail=True))
    with pytest.raises(ComPortError):
        app.serial_open()
    assert app.port_state == "Failed to open COM10"
    assert app.serial_open_called


def test_open_button_caption(tmp_path):
    app = make_app(tmp_path)
    assert app.open_button_caption == "COM10 (re)open"


def test_reinit_tick_before_open_does_nothing(tmp_path):
    port = FakePort()
    app = make_app(tmp_path, port)
    assert app.reinit_tick() is False
    assert port.opened == []


def test_reinit_tick_reopens_lost_port(tmp_path):
    port = FakePort(fail=True)
    app = make_app(tmp_path, port)
    with pytest.raises(ComPortError):
        app.serial_open()
    port.fail = False
    assert app.reinit_tick() is True
    assert port.is_open
    assert app.reinit_tick() is False
    assert len(port.opened) == 2


def test_reinit_tick_respects_auto_reinit(tmp_path):
    port = FakePort()
    app = make_app(tmp_path, port)
    app.settings.serial_port.auto_reinit = False
    app.serial_open()
    port.close()
    assert app.reinit_tick() is False
    assert not port.is_open


def test_apply_settings_reopens_on_change(tmp_path):
    port = FakePort()
    app = make_app(tmp_path, port)
    app.serial_open()
    new = Settings()
    new.serial_port.name = "COM3"
    app.apply_settings(new)
    assert port.opened[-1] == (PORT_NAME_PREFIX + "COM3", 2000000)
    assert app.settings is new


def test_apply_settings_keeps_port_when_unchanged(tmp_path):
    port = FakePort()
    app = make_app(tmp_path, port)
    app.serial_open()
    app.apply_settings(Settings())
    assert len(port.opened) == 1


def test_apply_settings_resizes_leds(tmp_path):
    app = make_app(tmp_path)
    new = Settings()
    new.ws2812.led_count = 5
    new.logging.max_ui_log_lines = 77
    app.apply_settings(new)
    assert app.led_count == 5
    assert len(app.manual.colors) == 5
    assert app.manual.colors is new.ws2812.manual_control
    assert app.log_view.max_lines == 77


def test_write_when_closed_sets_status(tmp_path):
    port = FakePort()
    app = make_app(tmp_path, port)
    app.write_colors([Ws2812Color(1, 2, 3)])
    assert app.status == STATUS_PORT_NOT_OPENED
    assert port.written == []


def test_write_one_for_all(tmp_path):
    port = FakePort()
    app = make_app(tmp_path, port)
    app.update_led_count()
    app.serial_open()
    color = Ws2812Color(10, 20, 30)
    app.write_one_for_all(color)
    assert port.written == [encode(one_for_all(color, Ws2812Settings.DEFAULT_LED_COUNT))]
    assert app.status == ""


def test_write_failure_closes_port(tmp_path):
    port = FakePort(fail_write=True)
    app = make_app(tmp_path, port)
    app.serial_open()
    app.write_colors([Ws2812Color(1, 1, 1)])
    assert app.status == STATUS_WRITE_FAILED
    assert not port.is_open


def test_write_manual_sends_stored_colors(tmp_path):
    port = FakePort()
    app = make_app(tmp_path, port)
    app.update_led_count()
    app.serial_open()
    app.manual.colors[0].g = 200
    app.write_manual()
    assert port.written == [encode(app.manual.colors)]


def test_animation_step(tmp_path):
    port = FakePort()
    settings = Settings()
    settings.ws2812.led_count = 3
    app = make_app(tmp_path, port, settings)
    app.update_led_count()
    app.serial_open()
    interval = app.animation_step(Animator(AnimationType.MOVING_PIXEL))
    assert interval == MOVING_PIXEL_INTERVAL
    assert port.written == [encode([Ws2812Color(r=255), Ws2812Color(), Ws2812Color()])]


def test_animation_step_port_closed(tmp_path):
    app = make_app(tmp_path)
    assert app.animation_step(Animator()) is None
    assert app.status == STATUS_PORT_NOT_OPENED


def test_start_reads_config_and_logs(tmp_path):
    config = tmp_path / "app.json"
    config.write_text(
        json.dumps({"serialPort": {"openAtStartup": False}, "ws2812": {"ledCount": 4}})
    )
    port = FakePort()
    app = make_app(tmp_path, port)
    app.start()
    assert port.opened == []
    assert app.led_count == 4
    assert len(app.manual.colors) == 4
    assert app.logger.level == LogLevel.TRACE
    app.log_view.flush()
    assert "Application started" in app.log_view.lines


def test_start_opens_port_at_startup(tmp_path):
    port = FakePort()
    app = make_app(tmp_path, port)
    app.start()
    assert port.is_open
    assert app.serial_open_called


def test_shutdown_saves_and_closes(tmp_path):
    port = FakePort()
    app = make_app(tmp_path, port)
    app.serial_open()
    app.settings.serial_port.name = "COM3"
    app.shutdown()
    assert not port.is_open
    loaded = Settings()
    loaded.read(tmp_path / "app.json")
    assert loaded.to_dict() == app.settings.to_dict()


def test_main_lists_ports(capsys):
    fake = [SimpleNamespace(device="COM7", description="USB bridge", hwid="USB VID")]
    with mock.patch("ws2812tool.comport.list_ports.comports", return_value=fake):
        assert main(["ports"]) == 0
    assert "COM7\tUSB bridge" in capsys.readouterr().out


def test_main_fails_on_missing_port(tmp_path, capsys):
    code = main(
        ["--config", str(tmp_path / "cfg.json"), "--port", "/nonexistent/ttyXYZ",
         "color", "1", "2", "3"]
    )
    assert code == 1
    assert "Failed to open /nonexistent/ttyXYZ" in capsys.readouterr().err


def test_main_rejects_out_of_range_component(tmp_path):
    with pytest.raises(SystemExit):
        main(["--config", str(tmp_path / "cfg.json"), "color", "300", "0", "0"])